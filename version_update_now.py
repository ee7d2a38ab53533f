"""
Stamp blocknum/version.py with a UTC version-code.

version.py is a docstring-only module.  Its docstring is a version-code like 0.0.1.2026.1019.0312.07
The base, 0.0.1 there, is kept from whatever version.py already says.
"""

import datetime
import sys

VERSION_PY = 'blocknum/version.py'
VERSION_BASE_DEFAULT = '0.0.1'
BASE_PARTS = 3   # major.minor.patch, ahead of the timestamp


def version_base(version_code):
    """The major.minor.patch part of a version-code, stripped of any older timestamp."""
    parts = version_code.split('.')
    if len(parts) < BASE_PARTS or not all(part.isdigit() for part in parts[:BASE_PARTS]):
        return VERSION_BASE_DEFAULT
    return '.'.join(parts[:BASE_PARTS])
assert '0.0.1' == version_base('0.0.1')
assert '1.2.3' == version_base('1.2.3.2019.0524.1959.39')
assert '0.0.1' == version_base('')


def stamped(base, when):
    return base + '.' + when.strftime('%Y.%m%d.%H%M.%S')


def main():
    try:
        with open(VERSION_PY, 'r') as version_py:
            old_code = version_py.read().strip().strip('"')
    except IOError:
        old_code = ''
    new_code = stamped(version_base(old_code), datetime.datetime.now(datetime.timezone.utc))
    with open(VERSION_PY, 'w') as version_py:
        version_py.write('"""' + new_code + '"""')
    print(VERSION_PY, old_code or '(none)', '->', new_code)
    return 0


if __name__ == '__main__':
    sys.exit(main())
