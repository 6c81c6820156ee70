class ParseError(Exception):
    """The uploaded spreadsheet container could not be opened or decoded."""
    pass


class StorageError(Exception):
    """The week menu store could not be read."""
    pass
