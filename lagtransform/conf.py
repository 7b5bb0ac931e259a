"""Configuration for this instance of lagtransform."""
from .mathops import np


class Config(object):
    """Global configuration of lagtransform."""
    def __init__(self,
                 precision=64,
                 points=10000,
                 epsilon=1e-3,
                 max_t=100,
                 t_points=1000,
                 t_step=0.1):
        """Create a new Config object.

        Parameters
        ----------
        precision : int
            32 or 64, number of bits of precision
        points : int
            number of samples used by the quadrature in the forward transform
        epsilon : float
            threshold below which a laguerre function is considered decayed
        max_t : float
            upper end of the interval searched for the optimal bound
        t_points : int
            number of samples used in the search for the optimal bound
        t_step : float
            default step between tabulated points

        """
        self.precision = precision
        self.points = points
        self.epsilon = epsilon
        self.max_t = max_t
        self.t_points = t_points
        self.t_step = t_step

    @property
    def precision(self):
        """Precision used for computations.

        Returns
        -------
        object : numpy.float32 or numpy.float64
            precision used

        """
        return self._precision

    @precision.setter
    def precision(self, precision):
        """Adjust precision used by lagtransform.

        Parameters
        ----------
        precision : int, {32, 64}
            what precision to use; either 32 or 64 bits

        Raises
        ------
        ValueError
            if precision is not a valid option

        """
        if precision not in (32, 64):
            raise ValueError('invalid precision.  Precision should be 32 or 64.')

        if precision == 32:
            self._precision = np.float32
        else:
            self._precision = np.float64

    @property
    def points(self):
        """Default number of quadrature samples."""
        return self._points

    @points.setter
    def points(self, points):
        if int(points) != points or points <= 0:
            raise ValueError('points must be a positive integer')

        self._points = int(points)

    @property
    def epsilon(self):
        """Default convergence threshold of the optimal bound search."""
        return self._epsilon

    @epsilon.setter
    def epsilon(self, epsilon):
        if epsilon < 0:
            raise ValueError('epsilon must be non-negative')

        self._epsilon = epsilon

    @property
    def max_t(self):
        """Default upper end of the optimal bound search."""
        return self._max_t

    @max_t.setter
    def max_t(self, max_t):
        if max_t < 0:
            raise ValueError('max_t must be non-negative')

        self._max_t = max_t

    @property
    def t_points(self):
        """Default resolution of the optimal bound search."""
        return self._t_points

    @t_points.setter
    def t_points(self, t_points):
        if int(t_points) != t_points or t_points < 0:
            raise ValueError('t_points must be a non-negative integer')

        self._t_points = int(t_points)

    @property
    def t_step(self):
        """Default step of a tabulation."""
        return self._t_step

    @t_step.setter
    def t_step(self, t_step):
        if t_step <= 0:
            raise ValueError('t_step must be positive')

        self._t_step = t_step


config = Config()
