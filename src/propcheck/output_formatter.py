from pprint import pformat


def format_bindings(bindings):
    if isinstance(bindings, dict):
        return ', '.join(
            '%s = %s' % (name, pformat(value))
            for name, value in bindings.items()
        )
    return ', '.join(pformat(value) for value in bindings)


def pre_output(n_successful, root, problem):
    return '\n'.join([
        '',
        '(after %d successful property test runs)' % (n_successful,),
        'Failed on:',
        '`%s`' % (format_bindings(root),),
        '',
        'Exception message:',
        '---',
        '%s: %s' % (type(problem).__name__, problem),
        '---',
        '',
    ])


def post_output(result, max_shrink_steps):
    if not result.shrunk:
        lines = ['(shrinking impossible)']
    else:
        lines = [
            '',
            'Shrunken input (after %d shrink steps):' % (result.steps,),
            '`%s`' % (format_bindings(result.root),),
            '',
            'Shrunken exception:',
            '---',
            '%s: %s' % (type(result.exception).__name__, result.exception),
            '---',
        ]
    if result.steps >= max_shrink_steps:
        lines.append(
            '(Note: Exceeded %d shrinking steps, the maximum.)' % (
                max_shrink_steps,))
    lines.append('')
    return '\n'.join(lines)
