"""SCOWL word list download, cached on disk."""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple
import requests


@dataclass(frozen=True)
class ScowlOptions:
    """Word list selection for the aspell.net SCOWL generator.

    See http://wordlist.aspell.net/scowl-readme/ for the meaning of each
    parameter.
    """

    max_size: int = 60
    spelling: Tuple[str, ...] = ('US',)
    max_variant: int = 0
    diacritic: str = 'strip'
    special: Tuple[str, ...] = ('hacker', 'roman-numerals')
    encoding: str = 'utf-8'

    def to_params(self) -> List[Tuple[str, Any]]:
        """Query parameters; repeated keys for multi-valued options."""
        params: List[Tuple[str, Any]] = [('max_size', self.max_size)]
        params += [('spelling', spelling) for spelling in self.spelling]
        params += [('max_variant', self.max_variant),
                   ('diacritic', self.diacritic)]
        params += [('special', special) for special in self.special]
        params += [('download', 'wordlist'),
                   ('encoding', self.encoding),
                   ('format', 'inline')]
        return params


class WordListDownloader:
    """Fetch a SCOWL word list once and reuse the cached copy afterwards."""

    BASE_URL = "http://app.aspell.net/create"
    CHUNK_SIZE = 64 * 1024

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: float = 60.0):
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self, cache_file: Path,
              options: ScowlOptions = ScowlOptions()) -> Path:
        """Return cache_file, downloading it first if it is missing."""
        if cache_file.exists():
            print(f"Using cached word list: {cache_file}")
            return cache_file

        cache_file.parent.mkdir(parents=True, exist_ok=True)
        partial = cache_file.with_name(cache_file.name + '.part')

        print(f"Downloading SCOWL word list (size {options.max_size}, "
              f"{', '.join(options.spelling)})...")
        with self.session.get(self.BASE_URL, params=options.to_params(),
                              timeout=self.timeout, stream=True) as response:
            response.raise_for_status()
            with open(partial, 'wb') as f:
                for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                    f.write(chunk)

        # Only a complete download becomes the cache
        partial.replace(cache_file)
        print(f"Word list cached to {cache_file}")
        return cache_file
