"""
Use Cases

Organized into domain folders:
- tenants/: Tenant registry and tenant context
- waste/: Waste record store
- reports/: Aggregation and report feeds
- documents/: Source document registry
- alerts/: Tenant alerts
- admin/: Batch recalculation and audit logs
"""
