# utils/i18n.py

"""Internationalization support."""
from typing import Dict


class Translator:
    """Simple translation system for multilingual support."""

    def __init__(self):
        self.current_lang = 'en'
        self.translations: Dict[str, Dict[str, str]] = {
            'en': {
                'app_description': 'List and extract the contents of REZ archives.',
                'list_help': 'List the contents of a REZ file.',
                'extract_help': 'Extract the files in a REZ file to a directory.',
                'info_help': 'Show the header information of a REZ file.',
                'rez_file_help': 'The REZ file to read.',
                'output_dir_help': 'The directory into which to extract the REZ file contents.',
                'filter_help': ('Only extract files whose paths match this pattern. May be given '
                                'several times; a file is extracted if it matches any of them.'),
                'output_help': 'Output format',
                'chunk_size_help': 'Copy buffer size (e.g. "64KB", "4MB")',
                'no_progress_help': 'Do not show a progress bar while extracting',
                'lang_help': 'Set language for CLI output',
                'verbose_help': 'Show diagnostic output',
                'quiet_help': 'Only show errors',

                'file_type': 'File type:',
                'user_title': 'User title:',
                'version': 'Version:',
                'archive_time': 'Time:',
                'resource_count': 'Resources:',
                'directory_count': 'Directories:',
                'total_size': 'Total size:',
                'extract_summary': 'Extracted {} file(s), {} in total; {} skipped by filters.',

                'error_prefix': 'Error: {}',
                'error_rez': 'failed to read REZ file {}: {}',
                'error_io': 'I/O error: {}',
                'invalid_chunk_size': 'Invalid chunk size: {}',
                'interrupted': 'Interrupted by user.',
            },
            'de': {
                'app_description': 'Inhalte von REZ-Archiven auflisten und entpacken.',
                'list_help': 'Den Inhalt einer REZ-Datei auflisten.',
                'extract_help': 'Die Dateien einer REZ-Datei in ein Verzeichnis entpacken.',
                'info_help': 'Die Kopfdaten einer REZ-Datei anzeigen.',
                'rez_file_help': 'Die zu lesende REZ-Datei.',
                'output_dir_help': 'Das Zielverzeichnis für die entpackten Dateien.',
                'filter_help': ('Nur Dateien entpacken, deren Pfad diesem Muster entspricht. Mehrfach '
                                'angebbar; eine Datei wird entpackt, wenn eines der Muster passt.'),
                'output_help': 'Ausgabeformat',
                'chunk_size_help': 'Größe des Kopierpuffers (z.B. "64KB", "4MB")',
                'no_progress_help': 'Keinen Fortschrittsbalken beim Entpacken anzeigen',
                'lang_help': 'Sprache der Ausgabe',
                'verbose_help': 'Diagnoseausgaben anzeigen',
                'quiet_help': 'Nur Fehler anzeigen',

                'file_type': 'Dateityp:',
                'user_title': 'Benutzertitel:',
                'version': 'Version:',
                'archive_time': 'Zeit:',
                'resource_count': 'Ressourcen:',
                'directory_count': 'Verzeichnisse:',
                'total_size': 'Gesamtgröße:',
                'extract_summary': '{} Datei(en) entpackt, insgesamt {}; {} durch Filter übersprungen.',

                'error_prefix': 'Fehler: {}',
                'error_rez': 'REZ-Datei {} konnte nicht gelesen werden: {}',
                'error_io': 'E/A-Fehler: {}',
                'invalid_chunk_size': 'Ungültige Puffergröße: {}',
                'interrupted': 'Vom Benutzer abgebrochen.',
            }
        }

    def set_language(self, lang_code: str):
        """Set the current language."""
        if lang_code in self.translations:
            self.current_lang = lang_code

    def get(self, key: str, *args) -> str:
        """Get translated string, with optional formatting."""
        text = self.translations[self.current_lang].get(key)
        if text is None:
            text = self.translations['en'].get(key, key)
        if args:
            try:
                return text.format(*args)
            except (IndexError, KeyError):
                return text
        return text


# Global translator instance
translator = Translator()
