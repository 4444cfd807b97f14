"""
API server package — HTTP interface for webhook deliveries.

Receives swap event webhooks, delegates parsing to the webhook parser and
maps the outcome to an HTTP status. Exposes a liveness probe.
"""
