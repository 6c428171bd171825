"""
Unit test fixtures. No HTTP app; tests needing a DB use the in-memory db_session fixture.
"""
