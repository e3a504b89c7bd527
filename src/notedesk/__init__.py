"""notedesk - REST backend for a team notes application.

The core package holds the note domain, the shared domain primitives
(exceptions, time helpers), persistence and the HTTP/CLI presentation.
User lifecycle management lives in the sibling notedesk_identity package.
"""
