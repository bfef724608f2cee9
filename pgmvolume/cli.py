"""Interactive command shell for loading, projecting and compressing images."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import TextIO

from .image import Image
from .projection import Projection2D
from .volume import Volume

COMMANDS = {
    "ayuda": "Muestra la lista de comandos disponibles. Uso: ayuda [comando]",
    "salir": "Cierra la aplicación. Uso: salir",
    "cargar_imagen": "Carga una imagen PGM en memoria. Uso: cargar_imagen nombre.pgm",
    "info_imagen": "Muestra información de la imagen cargada. Uso: info_imagen",
    "cargar_volumen": (
        "Carga en memoria la serie ordenada de imagenes. "
        "Uso: cargar_volumen nombre_basexx.pgm n_im"
    ),
    "proyeccion2D": (
        "Genera una proyección 2D. Uso: proyeccion2D dirección criterio archivo.pgm"
    ),
    "codificar_imagen": (
        "Codifica la imagen usando Huffman. Uso: codificar_imagen archivo.huf"
    ),
    "decodificar_archivo": (
        "Decodifica un archivo Huffman. "
        "Uso: decodificar_archivo archivo.huf salida.pgm"
    ),
    "segmentar": "Segmenta una imagen. Uso: segmentar salida.pgm sx1 sy1 sl1 ...",
}

BANNER = "Sistema de procesamiento de imágenes. Use 'ayuda' para ver los comandos."
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_count(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid number of images: {text!r}")
    return int(match.group(1))


class Session:
    """Holds the image and volume loaded during one shell session."""

    def __init__(self, resource_dir: str | Path = "recursos", out: TextIO | None = None) -> None:
        self.resource_dir = Path(resource_dir)
        self.out = out if out is not None else sys.stdout
        self.image = Image()
        self.volume = Volume("", 1)
        self.image_loaded = False
        self.volume_loaded = False

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def _resource(self, name: str) -> Path:
        return self.resource_dir / name

    def show_help(self, command: str = "") -> None:
        """Print the description of one command, or of all of them."""
        if command:
            description = COMMANDS.get(command)
            if description is None:
                self._say("Error: Comando no encontrado. Use 'ayuda' para ver los disponibles.")
            else:
                self._say(f"{command}: {description}")
            return
        self._say("Lista de comandos disponibles:")
        for name, description in COMMANDS.items():
            self._say(f"  {name}: {description}")

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the session should end."""
        parts = [word for word in line.split(" ") if word]
        if not parts:
            return True
        command, args = parts[0], parts[1:]

        if command == "ayuda":
            self.show_help(args[0] if args else "")
        elif command == "salir":
            self._say("Saliendo...")
            return False
        elif command == "cargar_imagen":
            self._load_image(args)
        elif command == "info_imagen":
            if args:
                self._say("Uso correcto: info_imagen")
            elif not self.image_loaded:
                self._say("No hay una imagen cargada en memoria.")
            else:
                self._say(self.image.info())
        elif command == "cargar_volumen":
            self._load_volume(args)
        elif command == "proyeccion2D":
            self._project(args)
        elif command == "codificar_imagen":
            self._encode(args)
        elif command == "decodificar_archivo":
            self._decode(args)
        elif command == "segmentar":
            self._segment(args)
        elif command == "info_volumen":
            if args:
                self._say("Uso correcto: info_volumen")
            elif not self.volume_loaded:
                self._say("No hay un volumen cargado en memoria.")
            else:
                self._say(self.volume.info())
        else:
            self._say("Error: Comando no reconocido o mal uso. Use 'ayuda' para más detalles.")
        return True

    def _load_image(self, args: list[str]) -> None:
        if len(args) != 1:
            self._say("Uso correcto: cargar_imagen nombre.pgm")
            return
        try:
            self.image.load(self._resource(args[0]))
        except (OSError, ValueError) as error:
            self._say(f"Error al cargar la imagen: {error}")
            return
        self._say(f"Imagen {args[0]} cargada exitosamente.")
        self.image_loaded = True

    def _load_volume(self, args: list[str]) -> None:
        if len(args) != 2:
            self._say("Uso correcto: cargar_volumen nombre_base n_im")
            return
        try:
            count = _parse_count(args[1])
            self.volume = Volume(str(self._resource(args[0])), count)
            self.volume.load()
        except (OSError, ValueError) as error:
            self._say(f"Error al cargar el volumen: {error}")
            return
        self._say(f"Volumen {args[0]} con {count} imágenes cargado exitosamente.")
        self.volume_loaded = True

    def _project(self, args: list[str]) -> None:
        if len(args) != 3:
            self._say("Uso correcto: proyeccion2D dirección criterio archivo.pgm")
            return
        direction, criterion, output = args[0][0], args[1], args[2]
        try:
            Projection2D().generate(self.volume, criterion, direction, self._resource(output))
        except (OSError, ValueError, IndexError) as error:
            self._say(f"Error al generar la proyección: {error}")
            return
        self._say(f"Proyección generada y guardada en: {output}")

    def _encode(self, args: list[str]) -> None:
        if len(args) != 1:
            self._say(
                "Recuerde, para usar el comando codificar_imagen, se debe usar el "
                "formato: codificar_imagen archivo.huf"
            )
            return
        if not self.image_loaded:
            self._say("Error: No hay una imagen cargada para codificar.")
            return
        self._say(
            "La imagen en memoria ha sido codificada exitosamente y almacenada "
            f"en el archivo {args[0]}"
        )
        self.image.encode(self._resource(args[0]))

    def _decode(self, args: list[str]) -> None:
        if len(args) != 2:
            self._say(
                "Recuerde, para usar el comando decodificar_archivo, se debe usar el "
                "formato: decodificar_archivo archivo.huf salida.pgm"
            )
            return
        self._say(f"Decodificando archivo: {args[0]} y guardando en: {args[1]}")
        self.image.decode(self._resource(args[0]), self._resource(args[1]))

    def _segment(self, args: list[str]) -> None:
        if len(args) < 4 or len(args) % 3 != 1:
            self._say(
                "Recuerde que para usar el comando segmentar, se debe usar el formato: "
                "segmentar salida.pgm sx1 sy1 sl1 (para s múltiplos del 3) "
            )
            return
        self._say(f"Segmentando imagen y guardando en: {args[0]}")


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input until 'salir' or end of input."""
    parser = argparse.ArgumentParser(description="Grey-scale image and volume shell.")
    parser.add_argument(
        "--resources",
        default="recursos",
        help="directory holding the image files (default: recursos)",
    )
    args = parser.parse_args(argv)
    session = Session(args.resources)
    print(BANNER)
    while True:
        print("$ ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            break
        if not session.execute(line.rstrip("\r\n")):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())