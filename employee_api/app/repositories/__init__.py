"""
Data access layer.

Repositories own the SQL for a table and return schema objects, so the
service layer never touches ``sqlite3`` directly.
"""
