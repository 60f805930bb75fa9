"""Properties app package.

Property listings: the model, filtering, and the owner-guarded catalog API.
"""
