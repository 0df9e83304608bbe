"""
The MODEL layer contains pure data structures and the selection/sort/aggregation logic.
It has NO knowledge of the GUI (Qt widgets) or the charts (pyqtgraph).
It deals with the skill vocabulary, the dataset, orderings and group profiles.
"""
