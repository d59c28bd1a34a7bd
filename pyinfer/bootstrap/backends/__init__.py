from pyinfer.bootstrap.backends.cpu import CPUBootstrapBackend

__all__ = ["CPUBootstrapBackend"]
