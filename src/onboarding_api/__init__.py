"""Employee onboarding API and form client."""

__version__ = "0.1.0"
