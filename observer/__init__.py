"""
Observer demo.

A VideoChannel (subject) notifies its ChannelSubscribers (observers) whenever
a new video is uploaded.
"""

from observer.channel import Channel, ChannelSubscriber, Subscriber, VideoChannel

__all__ = [
    "Channel",
    "ChannelSubscriber",
    "Subscriber",
    "VideoChannel",
]
