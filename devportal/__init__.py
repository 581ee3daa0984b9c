"""Developer-portal plugins: DRN routes, scaffolder actions, workspace name availability."""

__version__ = "1.0.0"
