"""
Channel demo for the Observer pattern.

Three users follow a channel; one unsubscribes between two uploads.
"""

from observer.channel import ChannelSubscriber, VideoChannel


def run_channel_demo() -> VideoChannel:
    """Run the two-upload scenario and return the channel for inspection."""
    tech_channel = VideoChannel("Tech Insights")

    alice = ChannelSubscriber("Alice", tech_channel)
    bob = ChannelSubscriber("Bob", tech_channel)
    charlie = ChannelSubscriber("Charlie", tech_channel)

    for subscriber in (alice, bob, charlie):
        tech_channel.subscribe(subscriber)

    tech_channel.upload_video("Observer Pattern in Java")

    tech_channel.unsubscribe(bob)
    tech_channel.upload_video("Advanced Java Multithreading")

    return tech_channel


if __name__ == "__main__":
    from shared.logging_config import configure_logging

    configure_logging()
    run_channel_demo()
