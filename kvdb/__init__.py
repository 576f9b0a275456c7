"""
KVDB - in-memory key-value store editable through an HTML form
"""
