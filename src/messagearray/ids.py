"""Stable output ids for rendered messages.

An output id is the message id, plus a digest of its params when it has
any. It is used as the ``id`` attribute of the rendered ``<li>`` so a page
can link to one specific message.
"""

import base64
import hashlib
from typing import Any, Mapping

from .models import Message


def message_output_id(message_or_id: "Message | str", params: Mapping[str, Any] | None = None) -> str:
    """Build the output id for a message.

    Params are serialized as ``key=value`` tokens (bare ``key`` for a None
    value), sorted by key, tab-joined and hashed with MD5. The digest is
    base64 without padding, so the id does not depend on param order.

    Args:
        message_or_id: Message record, or a message id string
        params: Params when an id string is given; ignored for a Message

    Returns:
        ``id`` when there are no params, else ``id~digest``
    """
    if isinstance(message_or_id, Message):
        message_id = message_or_id.id
        params = message_or_id.params or {}
    else:
        message_id = message_or_id
        params = params or {}

    output_id = str(message_id)

    if params:
        tokens = []
        for key in sorted(params, key=str):
            token = str(key)
            if params[key] is not None:
                token += f"={params[key]}"
            tokens.append(token)
        output_id += "~" + _md5_base64("\t".join(tokens))

    return output_id


def _md5_base64(data: str) -> str:
    digest = hashlib.md5(data.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii").rstrip("=")
