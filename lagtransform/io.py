"""Console formatting and file export of tabulations."""
import json
import shutil

from io import StringIO, IOBase

from .mathops import array_to_true_numpy


def _normalize_width(value, width):
    s = '' if value is None else str(value)
    if len(s) > width:
        return s[:width]

    return s.rjust(width)


def format_tabulation(tabulation, headers, column_width=8):
    """Format a tabulation as a text table.

    Parameters
    ----------
    tabulation : dict
        key -> value mapping, printed in iteration order
    headers : sequence of str
        column headers, e.g. ('t', 'L(t)')
    column_width : int, optional
        width of each cell; longer values are truncated

    Returns
    -------
    str
        the table, one row per line

    """
    headers = [_normalize_width(h, column_width) for h in headers]
    header = '# ' + ' # '.join(headers) + ' #'
    rule = '=' * len(header)
    divider = '-' * len(header)

    lines = [rule, header, rule]
    for k, v in tabulation.items():
        lines.append('| ' + _normalize_width(k, column_width) + ' | ' + _normalize_width(v, column_width) + ' |')
        lines.append(divider)

    return '\n'.join(lines)


def _write_buffer(file, s):
    s.seek(0)
    if not isinstance(file, IOBase):
        with open(file, 'w', newline='') as fd:
            shutil.copyfileobj(s, fd)
    else:
        shutil.copyfileobj(s, file)


def write_tabulation_csv(file, tabulation, headers=('t', 'l')):
    """Write a tabulation to a CSV file.

    Parameters
    ----------
    file : str or path_like or file_like
        where to write
    tabulation : dict
        key -> value mapping
    headers : sequence of str, optional
        two column names; ('t', 'l'), ('n', 'l'), ('t', 'f') and ('t', 'h')
        are the conventional ones

    """
    if len(headers) != 2:
        raise ValueError(f'a tabulation has two columns, got headers {headers}')

    s = StringIO()
    s.write(','.join(headers) + '\n')
    for k, v in tabulation.items():
        # numpy scalars repr with their type name
        k = k.item() if hasattr(k, 'item') else k
        s.write(f'{k!r},{float(array_to_true_numpy(v))!r}\n')

    _write_buffer(file, s)


def _parse_key(text):
    try:
        return int(text)
    except ValueError:
        return float(text)


def read_tabulation_csv(file):
    """Read a tabulation written by write_tabulation_csv.

    Parameters
    ----------
    file : str or path_like or file_like
        where to read from

    Returns
    -------
    headers : tuple of str
        the two column names
    tabulation : dict
        key -> value mapping; integer keys stay integers

    """
    if not isinstance(file, IOBase):
        with open(file, 'r') as fid:
            lines = fid.read().splitlines()
    else:
        lines = file.read().splitlines()

    headers = tuple(lines[0].split(','))
    tabulation = {}
    for line in lines[1:]:
        if not line:
            continue
        k, v = line.split(',')
        tabulation[_parse_key(k)] = float(v)

    return headers, tabulation


def write_parameters_json(file, function_name, max_n, max_t, t_step, points):
    """Write the parameters of an experiment as a JSON object.

    Parameters
    ----------
    file : str or path_like or file_like
        where to write
    function_name : str
        name of the transformed function
    max_n : int
        number of transform coefficients
    max_t : float
        end of the tabulated interval
    t_step : float
        tabulation step
    points : int
        quadrature sample count

    """
    params = {
        'functionName': function_name,
        'maxN': max_n,
        'maxT': max_t,
        'tStep': t_step,
        'points': points,
    }
    s = StringIO()
    json.dump(params, s, indent=2)
    s.write('\n')
    _write_buffer(file, s)
