"""
Domain layer of the LMS backend: catalog entities and assessment records.
"""
