"""
Backend de la boutique en ligne.

Catalogue produits, prise de commandes, statistiques du tableau de bord
et vérification des identifiants admin, au-dessus d'un stockage clé-valeur
de trois enregistrements JSON (`products`, `orders`, `admin`).
"""
