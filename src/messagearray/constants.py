"""Constants and defaults for message storage and rendering.

Channel labels, tag syntax and configuration defaults are centralized
here so renderers and the store agree on them.
"""

import re
from typing import Any, Dict

# Per-channel render defaults: labels for the <h2> heading and whether
# the heading is shown at all
CHANNEL_DEFAULTS: Dict[str, Dict[str, Any]] = {
    'errors': {'singular': 'Error', 'plural': 'Errors', 'h2': True},
    'warnings': {'singular': 'Warning', 'plural': 'Warnings', 'h2': True},
    'notes': {'singular': 'Note', 'plural': 'Notes', 'h2': False},
}

# [: name attr=val ... :] markers, non-greedy and spanning newlines
TAG_PATTERN = re.compile(r'(\[:.*?:\])', re.DOTALL)

# Attribute tokens: key="quoted value" or any single non-space run
ATTRIBUTE_TOKEN_PATTERN = re.compile(r'\S+\s*=\s*".*?"|\S+', re.DOTALL)

# Built-in parameter substitution tag
SUB_TAG = 'sub'

# Separator between an HTML id prefix and the output id
ID_PREFIX_SEPARATOR = '~'

# Placeholders returned by get_message_string() for records it cannot render
UNKNOWN_TEXT_PLACEHOLDER = '[unknown message type 1]'
UNKNOWN_HTML_PLACEHOLDER = '[unknown message type 2]'

# Configuration file searched for by load_config()
CONFIG_FILE_NAME = '.messagearray.json'

DEFAULT_CONFIG = {
    'fail_on_error_add': False,
    'show_msg_ids': False,
    'lang': 'en',
}
