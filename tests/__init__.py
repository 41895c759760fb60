from typing import List

def statements(javascript:str) -> List[str]:
    """
    The statements of a generated function, without the header and the closing line.
    """
    lines = javascript.split('\n')
    assert lines[0] == '(function(){'
    assert lines[-1] == '})'
    return lines[1:-1]
