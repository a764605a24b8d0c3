from datetime import datetime
from typing import Any
from collections.abc import Callable


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type LambdaConfiguration = dict[str, Any]

# Injected capabilities
type Clock = Callable[[], datetime]
type TokenFactory = Callable[[], str]
type LambdaDiagnosticResponse = str  # JSON-encoded, not an HTTP response
