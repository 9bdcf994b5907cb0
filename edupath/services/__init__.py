"""
Use cases for the EduPath API.

Each service orchestrates a collection store to implement the business rules
(unique accounts, catalog CRUD, application linkage). Routers call these
services instead of reading the JSON files directly.
"""
