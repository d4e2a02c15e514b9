from .frame_export import boxes_from_frame, boxes_to_frame

__all__ = ["boxes_to_frame", "boxes_from_frame"]
