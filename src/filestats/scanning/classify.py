"""Extension classification shared by path filtering and scanning."""


def classify(name: str) -> str:
    """Map a file name to its extension tag.

    The tag is the upper-cased text after the last ``.``, or ``""`` when the
    name has no dot. Only the bare file name should be passed, never a full
    path, since directory names may contain dots.

    >>> classify("Main.java")
    'JAVA'
    >>> classify("archive.tar.gz")
    'GZ'
    >>> classify("Makefile")
    ''
    """
    name = name.upper()
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]
