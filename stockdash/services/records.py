from pydantic import ValidationError as PydanticValidationError

from stockdash.core.errors import StorageError


def load_models(store, name, model):
    """Load a collection and parse every record into ``model``.

    A record that does not fit the model means the stored file is corrupt,
    which is a storage failure rather than bad client input.
    """
    records = store.load_collection(name)
    try:
        return [model.model_validate(record) for record in records]
    except PydanticValidationError as exc:
        raise StorageError(f"Malformed record in {name}: {exc.error_count()} error(s)") from exc


def dump_models(models):
    return [model.to_record() for model in models]


__all__ = ["dump_models", "load_models"]
