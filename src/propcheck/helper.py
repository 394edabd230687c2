def call_splatted(function, value):
    """Call function with value, unpacking dicts into keyword arguments."""
    if isinstance(value, dict):
        return function(**value)
    return function(value)


def truncated_half(x):
    if x >= 0:
        return x // 2
    return -((-x) // 2)


def halvings(value):
    """Values approaching zero by repeatedly subtracting halves of value.

    For 20 this is 0, 10, 15, 18, 19.
    """
    x = value
    while x != 0:
        yield value - x
        x = truncated_half(x)
