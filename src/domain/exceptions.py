"""
Excepciones de dominio del proyecto pothen-parser.

Permiten que el código de orquestación (DeclarationProcessor) distinga
entre "el documento no tiene declarante" y "el PDF está corrupto" y
tome acciones diferentes para cada caso.

Jerarquía:
    DeclarationParserError
    ├── MissingIdentityError   → No se encontró nombre o apellido del declarante
    ├── InvalidFormatError     → El archivo no existe o no tiene el formato esperado
    ├── ExtractionError        → Error al extraer texto del archivo
    └── OutputError            → Error al generar el archivo de salida

Los fallos por línea (un monto que no se puede leer junto a una moneda)
NO son excepciones: son resultados esperados de una heurística y se
reportan a la bitácora como candidatos descartados.
"""


class DeclarationParserError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class MissingIdentityError(DeclarationParserError):
    """Se lanza cuando no se encuentra el nombre o el apellido del declarante.

    Es un error FATAL: sin identidad no se produce ni la declaración
    ni sus partidas.
    """

    def __init__(self, archivo: str, campos_faltantes: list[str]):
        self.archivo = archivo
        self.campos_faltantes = campos_faltantes
        mensaje = "No se pudo extraer la identidad del declarante"
        if archivo:
            mensaje += f" de '{archivo}'"
        mensaje += f". Campos faltantes: {', '.join(campos_faltantes)}"
        super().__init__(mensaje)


class InvalidFormatError(DeclarationParserError):
    """Se lanza cuando un archivo no existe o no tiene el formato esperado.

    Ejemplos:
    - La ruta no existe.
    - Se esperaba un PDF pero el archivo es un .docx.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(DeclarationParserError):
    """Se lanza cuando falla la extracción de texto de un archivo.

    Esto puede pasar porque:
    - El PDF está protegido con contraseña.
    - pdfplumber no puede leer el archivo.
    - Tesseract no está instalado pero se intentó OCR.
    - El archivo de texto no está en UTF-8.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error extrayendo texto de '{archivo}': {causa}")


class OutputError(DeclarationParserError):
    """Se lanza cuando falla la generación del archivo de salida."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
