"""Exceptions raised by the message engine.

Only two conditions are hard errors: building a datastore without any usable
source and calling a resolver without its required arguments. Everything
else (bad language codes, unknown sources, unreadable data, unresolved keys)
is absorbed and surfaces as a fallback value.
"""


class I18nError(Exception):
    """Base exception for all message engine errors.

    Example:
        try:
            ds = load_messages(*sources)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class ConfigurationError(I18nError):
    """Raised when a datastore is built without any valid source.

    Example:
        >>> load_messages("", None)
        Traceback (most recent call last):
        ...
        ConfigurationError: no source supplied to load_messages
    """

    pass


class InvalidCallError(I18nError):
    """Raised when a resolver is called without its required arguments.

    Example:
        >>> ds.msg(None)
        Traceback (most recent call last):
        ...
        InvalidCallError: missing arguments in Datastore.msg
    """

    pass
