"""schoolpay: HTTP API for school fee payments, organizations and chat."""
