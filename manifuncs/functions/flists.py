from ..evaluater import export_evaluater_function
from ..parameters import ArrayParameter, StringParameter, OneOfParameter

FUNCTION_GROUP = 'list'

_string_parameter = StringParameter('value')
_array_parameter = ArrayParameter('value')
_value_parameter = OneOfParameter('value', [_string_parameter, _array_parameter],
                                  error='Requires either array or string type to work with')


def stringify(value):
    """Give the manifest string form of a value: booleans are 'true'/'false', None is the empty
    string, numbers use their usual form, and arrays and dicts are rendered element by element."""
    if isinstance(value, str):
        return value
    # NOTE: bool is a subclass of int, so must be checked before numbers
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return ''
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, bytes):
        return value.decode('utf8', 'replace')
    if isinstance(value, (list, tuple)):
        return '[%s]' % ', '.join([stringify(e) for e in value])
    if isinstance(value, dict):
        return '{%s}' % ', '.join(['%s => %s' % (stringify(k), stringify(v)) for (k, v) in value.items()])
    return str(value)


@export_evaluater_function(function_group=FUNCTION_GROUP,
                           parameters=[ArrayParameter('array', error='Requires an array type to work with'),
                                       StringParameter('prefix', default=None, error='Requires prefix to be of a string type')])
def prefix(array, prefix=None):
    """**prefix(array, prefix=None)** -> return a new list with each element of the array prefixed by the prefix string

 * array: (list) elements to prefix. Non string elements are converted to strings first (true/false for booleans).
 * prefix: (string, optional) string to put before each element. If not set, the elements are returned as they are.


<code>
    Example:
        prefix(['a', 'b', 'c', 1, 2, 3], 'element-')
    Returns:
        ['element-a', 'element-b', 'element-c', 'element-1', 'element-2', 'element-3']
</code>
    """
    # We concatenate with prefix or do nothing ...
    if prefix is None:
        return list(array)
    return [prefix + stringify(e) for e in array]


# 1, 1.0 and True are not the same manifest value, so the type is part of the key, at every level
def _uniq_key(value):
    if isinstance(value, (list, tuple)):
        return (type(value), tuple([_uniq_key(e) for e in value]))
    if isinstance(value, dict):
        pairs = [(_uniq_key(k), _uniq_key(v)) for (k, v) in value.items()]
        try:
            return (dict, frozenset(pairs))
        except TypeError:  # some values are not hashable objects, so the keys order matters then
            return (dict, tuple(pairs))
    if isinstance(value, (set, frozenset)):
        return (type(value), frozenset([_uniq_key(e) for e in value]))
    return (type(value), value)


def _uniq_elements(elements):
    kept = []
    seen = set()
    unhashable_seen = []
    for e in elements:
        key = _uniq_key(e)
        try:
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            # unhashable objects: compare with the keys we already did keep
            if key in unhashable_seen:
                continue
            unhashable_seen.append(key)
        kept.append(e)
    return kept


@export_evaluater_function(function_group=FUNCTION_GROUP,
                           parameters=[_value_parameter])
def uniq(value):
    """**uniq(value)** -> return the value without its duplicates, either a string or a list

 * value: (string or list) for a string, characters already seen are removed. For a list, elements already seen are removed. The first occurrence order is kept.


<code>
    Example:
        uniq('abbc')
    Returns:
        'abc'

    Example:
        uniq(['d', 'e', 'e', 'f', 'f'])
    Returns:
        ['d', 'e', 'f']
</code>
    """
    if _value_parameter.get_matching_choice(value) is _string_parameter:
        return ''.join(_uniq_elements(value))
    # Keep the kind of array we did receive
    if isinstance(value, tuple):
        return tuple(_uniq_elements(value))
    return _uniq_elements(value)
