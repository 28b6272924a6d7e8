"""
Service layer abstraction.

Each service encapsulates the logic for a domain and talks to the
store it is given, so handlers never touch persistence directly.
"""
