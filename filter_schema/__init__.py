"""
Filter Schema: GraphQL filter condition and order-by input types derived
from entity metadata.
"""
