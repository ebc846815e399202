"""
Modulo per la gestione della configurazione del formatter di cue sheet
"""
import copy
import os
import yaml
from typing import Dict, Any, Optional

from .core.formats import DEFAULT_FORMAT_ID, DEFAULT_CUSTOM_TEMPLATE


class Config:
    """Classe per gestire la configurazione dell'applicazione"""

    DEFAULT_CONFIG = {
        'format': DEFAULT_FORMAT_ID,
        'custom_template': DEFAULT_CUSTOM_TEMPLATE,
        'offset': '',
        'output_file': None,
        # Formati aggiuntivi: id -> {label, template}
        'formats': {},
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
                if file_config:
                    if not isinstance(file_config, dict):
                        raise ValueError("il file deve contenere una mappa chiave/valore")
                    # Merge profondo per formats
                    for key, value in file_config.items():
                        if key == 'formats' and isinstance(value, dict):
                            self._deep_merge(self.config.setdefault(key, {}), value)
                        else:
                            self.config[key] = value
        except Exception as e:
            raise Exception(f"Errore nel caricamento del file di configurazione: {e}")

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
