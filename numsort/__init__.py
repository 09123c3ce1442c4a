"""numsort: random numeric files and in-place sorting.

`file_processor.FileProcessor` creates the output directory, writes a file of
random integers one per line, and rewrites such a file in ascending order.
"""

__all__ = ["file_processor"]
