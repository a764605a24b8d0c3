import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for storing share records and reading documents.

    An optional prefix can be provided to namespace all generated keys.
    It is highly encouraged to set a custom prefix for each app and environment,
    e.g. "sharelinks:prod" or "sharelinks:dev".

    Keys:
        shares:<token>                    JSON-encoded share record
        share_index:<document id>         set of tokens issued for a document
        documents:<document id>           hash holding the document (owned by the note editor)
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def share_key(self, token: str) -> str:
        return f'shares:{token}'

    @prefix_key
    def document_shares_key(self, document_id: str) -> str:
        return f'share_index:{document_id}'

    @prefix_key
    def document_key(self, document_id: str) -> str:
        return f'documents:{document_id}'
