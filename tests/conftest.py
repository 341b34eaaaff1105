"""Test configuration and fixtures."""

import logfire

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)
