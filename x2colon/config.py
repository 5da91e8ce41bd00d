"""
Modulo per la gestione della configurazione di x2-colon
"""
import copy
import os
import yaml
from typing import Dict, Any, Mapping, Optional


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded."""


class Config:
    """Classe per gestire la configurazione dell'applicazione"""

    DEFAULT_CONFIG = {
        'host': '127.0.0.1',
        'port': 3000,
        'log_level': 'INFO',
        'cors': {
            'allow_origin': '*',
            'allow_methods': '*',
            'allow_headers': '*',
        },
    }

    # Variabili d'ambiente -> (chiave, conversione)
    ENV_VARS = {
        'X2COLON_HOST': ('host', str),
        'X2COLON_PORT': ('port', int),
        'X2COLON_LOG_LEVEL': ('log_level', str),
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Inizializza la configurazione

        Args:
            config_file: Path al file di configurazione YAML (opzionale)
        """
        # Deep copy per evitare modifiche ai default
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Carica la configurazione da file YAML

        Args:
            config_file: Path al file di configurazione
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Errore nel caricamento del file di configurazione: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError("Errore nel caricamento del file di configurazione: "
                              "il contenuto deve essere una mappa")

        for key, value in file_config.items():
            # Merge profondo per cors
            if key == 'cors' and isinstance(value, dict):
                self._deep_merge(self.config.setdefault(key, {}), value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Merge profondo di dizionari nested

        Args:
            base: Dizionario base da aggiornare
            update: Dizionario con gli aggiornamenti
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """
        Aggiorna la configurazione dalle variabili d'ambiente

        Args:
            environ: Mappa delle variabili (default ``os.environ``)
        """
        environ = os.environ if environ is None else environ
        for var, (key, cast) in self.ENV_VARS.items():
            raw = environ.get(var)
            if raw is None or raw == '':
                continue
            try:
                self.config[key] = cast(raw)
            except ValueError as e:
                raise ConfigError(f"Valore non valido per {var}: {raw!r}") from e

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Aggiorna la configurazione con argomenti da CLI
        Gli argomenti CLI hanno precedenza sul file di configurazione

        Args:
            args: Dizionario con gli argomenti da CLI
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Ottiene un valore di configurazione

        Args:
            key: Chiave della configurazione
            default: Valore di default se la chiave non esiste

        Returns:
            Il valore della configurazione
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """
        Ottiene tutta la configurazione

        Returns:
            Dizionario con tutta la configurazione
        """
        return self.config.copy()
