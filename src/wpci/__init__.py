"""wpci: run tests against a disposable WordPress container in GitHub Actions."""

__version__ = "0.1.0"
