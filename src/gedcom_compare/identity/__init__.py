from .uuid_factory import deterministic_uuid, new_session_id

__all__ = ["deterministic_uuid", "new_session_id"]
