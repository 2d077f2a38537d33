# Services package init
"""
Incubator Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and the store.
Why:   Routes handle HTTP; services own the write rules, queries and stats.
How:   Every service receives the `Database` handle at construction and opens
       its own sessions. `catalog.build_services` wires one instance per
       resource for an application.

Service Inventory:
    - ResourceService: generic CRUD, list, public list and stats
    - EventService: adds the upcoming-events view and stats
    - ContactService: response tracking on update
    - ApplicationService: review/approval timestamps on status moves
    - AdminService: admin accounts, password change, self-deactivation guard
    - AuthService: login, bearer token resolution, bootstrap admin
"""
