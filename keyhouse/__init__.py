"""Key management building blocks: AES-256-GCM codec, codings, master keys and control-plane helpers."""

__version__ = "0.1.0"

__all__ = [
    "aes256gcm",
    "auth",
    "coding",
    "errors",
    "health",
    "master_key",
    "platform",
]