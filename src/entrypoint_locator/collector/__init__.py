from entrypoint_locator.collector.source_tree_collector import SourceTreeCollector

__all__ = ["SourceTreeCollector"]
