"""
Ingestion layer — loading metrics records from files for batch scoring.

Submodules:
  metrics_file — JSON / CSV import of MetricsInput records
"""
