class BuilditError(Exception):
    ...
