from entrypoint_locator.project.project_layout import ProjectLayout

__all__ = ["ProjectLayout"]
