import importlib.metadata

try:
    version = importlib.metadata.version("milight")
except importlib.metadata.PackageNotFoundError:
    version = "unknown"
