"""Allow ``python -m cachestore.cli`` execution.

Delegates to the cache CLI (``cachestore.cli.cache``), e.g.::

    python -m cachestore.cli keys 'session:*'
"""

from cachestore.cli.cache import main

main()
