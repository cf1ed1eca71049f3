"""
Script para inicializar la base de datos y crear todas las tablas.

Uso:
    python init_db.py          # crea las tablas que falten
    python init_db.py --reset  # elimina y recrea todas las tablas
"""
import sys
from app.core.database import init_db, reset_db
from app.core.logging import configure_logging


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()
    if "--reset" in argv:
        print("WARNING: This will drop all existing data in the database!")
        reset_db()
        print("Tablas recreadas exitosamente.")
    else:
        print("Creando tablas en la base de datos...")
        init_db()
        print("Tablas creadas exitosamente.")


if __name__ == "__main__":
    main()
