"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to the
flat‑file record store.  Services return plain record dictionaries (as
stored, camelCase keys) and raise ``ValueError`` for client errors;
``StoreError`` from the store propagates unchanged.
"""
