"""
Service layer abstraction.

Services encapsulate persistence logic so API handlers never issue SQL
themselves.
"""
