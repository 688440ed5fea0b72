import logging
from contextlib import contextmanager

from app.errors import StorageError
from app.extensions.json_store import get_json_store


logger = logging.getLogger(__name__)


def load_all(name, model):
    store = get_json_store()
    return [model.from_dict(record) for record in store.load(name)]


@contextmanager
def editing(name, model):
    """
    Hold the collection lock across load -> mutate -> save.

    The yielded list is written back only when the block exits normally; an
    exception leaves the stored collection untouched.
    """
    store = get_json_store()
    with store.lock(name):
        items = [model.from_dict(record) for record in store.load(name)]
        yield items
        if not store.save(name, [item.to_dict() for item in items]):
            logger.error("Mutation on collection %s was not persisted", name)
            raise StorageError()
