"""
Noteful Backend — Services Layer
==================================

Service Inventory:
    - sanitizer: Neutralizes markup in untrusted text (pure)
    - validator: Create / partial-update field rules, tagged results (pure)
    - resource_store: SqlAlchemyResourceStore, CRUD primitives over one table
    - resource_controller: ResourceController, orchestrates the three above
"""
