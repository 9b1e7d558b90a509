from workhub.infrastructure.security.werkzeug_password_hasher import WerkzeugPasswordHasher

__all__ = ["WerkzeugPasswordHasher"]
