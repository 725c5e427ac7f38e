"""Test configuration."""

import logfire

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)
