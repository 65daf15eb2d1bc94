"""Sauvegarde des enregistrements products/orders/admin dans BACKUP_DIR."""
from _runner import main

async def backup(service):
    report = await service.backup()
    for path in report.files:
        print(f"  {path}")
    return report

if __name__ == "__main__":
    main(backup, "sauvegarde des enregistrements")
