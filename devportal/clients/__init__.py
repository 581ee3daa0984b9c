"""HTTP clients for the plugin backends."""

from devportal.clients.drn_viewer import DrnViewerClient

__all__ = ["DrnViewerClient"]
