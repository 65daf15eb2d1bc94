"""Vérifie la connexion au stockage et affiche le contenu des enregistrements."""
from _runner import main

async def check(service):
    status = await service.check()
    if not status.reachable:
        raise OSError("stockage injoignable")
    print(f"Produits: {status.counts.products}")
    print(f"Commandes: {status.counts.orders}")
    print(f"Admin: {'présent' if status.counts.admin_present else 'absent'}")
    return status

if __name__ == "__main__":
    main(check, "vérification du stockage")
