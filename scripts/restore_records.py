"""Restauration (migration) des enregistrements depuis products.json, orders.json et admin.json."""
from _runner import main

async def restore(service):
    return await service.restore()

if __name__ == "__main__":
    main(restore, "restauration des enregistrements")
