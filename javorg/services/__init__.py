"""
Couche application (cas d'utilisation).

Les services orchestrent la logique du domaine :
- code_extractor : extraction du code depuis un nom de fichier
- scanner : decouverte des fichiers video
- resolver : recherche et verification des metadonnees
- artifacts : NFO et images
- relocator : deplacement des videos
- pipeline : orchestration par element

Les services dependent des ports (interfaces) de core/, jamais des
implementations concretes de adapters/.
"""
