"""
Niche catalog loading.

Modules
-------
seed_loader : load_catalog() + parse_catalog() — JSON seed file to a
              validated, ordered tuple of MicroNiche records.
"""
