"""
Custom exception hierarchy for chatroster.

## Exception Hierarchy

```
ChatRosterError (base)
├── ColorError
│   ├── InvalidHexColorError
│   └── PaletteError
├── IdentityError
│   └── IdentityParseError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ChatRosterError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recovery_hint`: Optional suggestion for how to fix the issue

`InvalidHexColorError` and `IdentityParseError` are also `ValueError`s,
so pydantic validators that raise them produce an ordinary
`ValidationError`.

### Example: Bad Hex Color

```python
from chatroster.colors import hex_to_color
from chatroster.exceptions import InvalidHexColorError

try:
    hex_to_color("#12345")
except InvalidHexColorError as e:
    print(e.user_message)   # not a valid hex color: '#12345'
    print(e.recovery_hint)  # Use a 7 character color such as '#2b292d'
```
"""

from .base import ChatRosterError
from .color import ColorError, InvalidHexColorError, PaletteError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)
from .identity import IdentityError, IdentityParseError

__all__ = [
    # Base
    "ChatRosterError",
    # Color
    "ColorError",
    "InvalidHexColorError",
    "PaletteError",
    # Identity
    "IdentityError",
    "IdentityParseError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
