"""
vclass package

Konsolen-Anwendung "VClass": Klassen und Schüler erfassen, speichern
und als Karten anzeigen.

Schichtenarchitektur:
- domain.py: Roster, Card + Fehler
- config.py: Konstanten und Umgebungsvariablen
- persistence.py: Textdatei-Persistierung
- service.py: Roster Store + Karten-ViewModel
- view.py: Karten-Rendering und Konsolen-Ausgabe
- console.py: Ein-/Ausgabe-Schnittstelle
- controller.py: Menü-Orchestrierung
- main.py: Einstiegspunkt
"""

__version__ = "1.0.0"
