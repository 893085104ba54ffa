"""Chat providers: message syntax, webhook payloads and delivery."""
