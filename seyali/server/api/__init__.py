"""
Route groups for the Seyali Status Service.

- health: liveness probe
- status: greeting and backing-service configuration status
"""
