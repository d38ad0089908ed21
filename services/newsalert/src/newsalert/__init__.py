"""
NewsAlert Widget Service.

Fetches alert records from a remote list, keeps the active ones, orders
them by display position, and renders them into the host page region.
"""
