# Services package init
"""
Hotel API - Services Layer
============================

What:  Layer between routes (HTTP) and repositories (persistence).
How:   Services receive a repository through their constructor and expose
       the operations route handlers call.

Service Inventory:
    - HotelService: hotel CRUD, soft delete and deleted-hotel listing
"""
