"""Issue Upvotes: rank the open issues of a GitHub repository by net upvotes.

For every open issue (pull requests excluded) the reactions are fetched and
scored:
- each ``+1`` reaction adds one point
- each ``-1`` reaction removes one point
- every other reaction is ignored
"""

__version__ = "1.0.0"
