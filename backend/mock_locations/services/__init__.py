# Services package init
"""
Mock Location API — Services Layer
====================================

Service Inventory:
    - LocationService: builds the fake corpus and slices out one page

Services know nothing about HTTP, so they are unit-tested directly
without a test client.
"""
