"""
Service layer abstraction.

``message_store`` holds the business rules of the record store and
``storage`` the interchangeable backends it keeps records in.
"""
