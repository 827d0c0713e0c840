import random
import string
import uuid

ID_CHARSET = string.ascii_letters + string.digits


def generate_short_id(length: int = 8) -> str:
    """Random alphanumeric id for tags and folders. Unique within a run, not unguessable."""
    return "".join(random.choices(ID_CHARSET, k=length))


def generate_snippet_id() -> str:
    """uuid4 without the dashes."""
    return uuid.uuid4().hex
