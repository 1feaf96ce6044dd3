"""story_card - turn blog posts into shareable story cards."""

__version__ = "0.1.0"
