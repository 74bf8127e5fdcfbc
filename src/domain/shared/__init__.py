"""
Utilidades compartidas del dominio.

Estas funciones son usadas por múltiples extractores de sección y no
dependen de ninguna librería externa. Solo operan sobre tipos nativos.

Uso:
    from src.domain.shared.greek_number import parse_greek_number, format_amount
    from src.domain.shared.line_window import LineWindow
    from src.domain.shared.text_cleaner import normalize_lines, clean_pdf_text
"""
