"""Alignment-change notification queue for followed news sources.

Followers of a source are queued a notification whenever the editorial
alignment score of that source changes. A periodic dispatcher drains the
queue, delivers push notifications and tracks delivery state.
"""
