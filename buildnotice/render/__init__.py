"""buildnotice rendering — build events to robot message bodies.

Modules
-------
fields
    Pure helpers deriving display values (environment, short commit).
markdown
    ``render_markdown`` builds the platform-specific message body.
draft
    ``to_outbound_draft`` projects an event into card routing metadata.
compose
    ``compose_message`` merges body, draft and mentions for delivery.
"""
