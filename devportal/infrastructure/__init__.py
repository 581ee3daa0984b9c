"""Infrastructure: in-process caches, Databricks account API client, mock DRN source."""
