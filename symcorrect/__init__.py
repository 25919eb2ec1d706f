"""
SymCorrect Spelling Correction Engine
=====================================
Version: 1.0.0

Single-token spelling correction:
- spelling: SymSpell index, bounded edit distance, dictionary loading
- context: Trigram model for reranking by the previous two words
- tracker: Word-by-word correction session with undo

Uses lazy loading - modules only import when accessed. Engines are built
explicitly with create_engine(); there is no shared global instance.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional

__version__ = "1.0.0"
__author__ = "SymCorrect"

_MODULES = {
    'spelling': 'symcorrect.spelling',
    'context': 'symcorrect.context',
    'tracker': 'symcorrect.tracker',
}

_loaded_modules = {}


def __getattr__(name):
    """Lazy load submodules on first access."""
    if name in _MODULES:
        if name not in _loaded_modules:
            import importlib
            _loaded_modules[name] = importlib.import_module(_MODULES[name])
        return _loaded_modules[name]
    raise AttributeError(f"module 'symcorrect' has no attribute '{name}'")


def __dir__():
    """List available submodules."""
    return list(_MODULES.keys()) + ['config', 'create_engine', 'get_status']


def create_engine(config=None, corpus: Optional[Iterable[str]] = None):
    """
    Build and load a Dictionary, attaching a trained context model if possible.

    Args:
        config: EngineConfig (defaults to the global configuration)
        corpus: Sentences to train the context model on; when omitted the
            configured corpus file is used, if any

    Returns:
        A loaded symcorrect.spelling.dictionary.Dictionary
    """
    from . import config as config_module
    from .spelling.dictionary import Dictionary
    from .context.trigram import TrigramModel
    from config_logging import get_logger, DictionaryError

    logger = get_logger('symcorrect')
    config = config or config_module.get_config()

    dictionary = Dictionary(config.spelling)

    if config.context.enabled:
        sentences = corpus
        if sentences is None and config.context.corpus_path:
            corpus_path = Path(config.context.corpus_path)
            try:
                sentences = corpus_path.read_text(encoding='utf-8').splitlines()
            except OSError as e:
                raise DictionaryError(
                    f"Could not read context corpus: {e}", filename=str(corpus_path)
                ) from e

        if sentences is not None:
            model = TrigramModel()
            model.train(sentences)
            dictionary.attach_context_model(model)
        else:
            logger.debug("No context corpus configured; context reranking off")

    dictionary.load()
    return dictionary


def get_status(dictionary=None) -> Dict[str, Any]:
    """
    Get status of the engine configuration and, optionally, a dictionary.
    """
    from . import config
    cfg = config.get_config()
    status = {
        'version': __version__,
        'enabled': cfg.spelling.enabled,
        'max_edit_distance': cfg.spelling.max_edit_distance,
        'context_enabled': cfg.context.enabled,
    }
    if dictionary is not None:
        status['dictionary'] = dictionary.get_status()
    return status
