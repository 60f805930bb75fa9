"""Bookings app package.

The booking lifecycle: renters request a property, owners accept or reject,
renters may cancel while the request is pending. Each transition records
in-app notifications and sends emails on a best-effort basis.
"""
