"""
Couche domaine (core).

Contient les entites, ports (interfaces abstraites), objets valeur et
exceptions. Cette couche ne depend d'aucun adaptateur (HTTP, CLI, disque).

Sous-packages :
- entities/ : DiscoveredItem
- ports/ : IMetadataService, IImageDownloader, IFileSystem
- value_objects/ : ScanRules, MetadataSidecar
"""
