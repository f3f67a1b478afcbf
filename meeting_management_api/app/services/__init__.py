"""
Service layer abstraction.

Services encapsulate the business logic for a domain.  The meeting
store keeps its data in memory; swapping it for a database would not
require changes to the API handlers.
"""
