"""
Shared builders for forecast payloads and mocked HTTP clients.
"""
