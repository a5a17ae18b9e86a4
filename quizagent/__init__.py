"""A ReAct-style agent that researches a topic with search tools and writes quiz questions to JSON."""

__version__ = "0.1.0"
__all__ = ["agent", "models", "web_search"]