"""Side-hustle blog writer.

Templated LLM prompts, a streaming generation API and the client-side
post-processing used to display the generated posts.
"""

__version__ = "0.1.0"
