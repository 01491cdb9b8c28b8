# Mocks must be in place before any test module declares resources
import azure_mocks  # noqa: F401
