"""Built-in chicken breed catalog.

``BREED_DATA`` is keyed by breed name. Insertion order is the catalog order
used when the breed vocabulary is sent to the vision model.
"""

import uuid

BREED_DATA = {
    "Sussex": {
        "id": "sussex",
        "origin": "United Kingdom",
        "coordinates": {"latitude": 50.9097, "longitude": -0.1276},
        "size": "Large (7-9 lbs)",
        "temperament": "Calm, friendly, curious",
        "egg_production": "250-280 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Dual-purpose (meat and eggs)",
        "colors": ["Light", "Red", "Speckled", "Brown", "Buff", "Silver", "White", "Coronation"],
        "image_url": "https://images.unsplash.com/photo-1548550023-2bdb3c5beed7",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Sussex_chicken",
        "description": "The Sussex is a British breed of dual-purpose chicken, reared both for its meat and for its eggs. Eight colours are recognised for both standard-sized and bantam fowl. A breed association, the Sussex Breed Club, was organised in 1903.",
        "habitat": "The Sussex chicken thrives in a variety of environments, from rural farmlands to suburban backyards. It is well-suited to free-range conditions but can also be kept in confined spaces if necessary. The breed is adaptable to different climates, though it performs best in temperate conditions."
    },
    "Rhode Island Red": {
        "id": "rhode-island-red",
        "origin": "United States (Rhode Island)",
        "coordinates": {"latitude": 41.5801, "longitude": -71.4774},
        "size": "Large (6.5-8.5 lbs)",
        "temperament": "Hardy, docile, sometimes aggressive",
        "egg_production": "200-300 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Dual-purpose (meat and eggs)",
        "colors": ["Deep red", "Mahogany"],
        "image_url": "https://i0.wp.com/valleyhatchery.com/wp-content/uploads/2021/11/Rhode-Island-Red-Chicks.webp",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Rhode_Island_Red",
        "description": "Rhode Island Red chickens are an American breed developed in the late 19th century. They are renowned for their hardiness, excellent egg-laying abilities, and rich mahogany red feathers. These birds are dual-purpose, suitable for both egg and meat production.",
        "habitat": "Rhode Island Reds are extremely adaptable birds that thrive in various climates. They do well in both free-range and confined settings. These hardy chickens can tolerate cold winters and hot summers, making them ideal for backyard flocks across different regions."
    },
    "Leghorn": {
        "id": "leghorn",
        "origin": "Italy (Tuscany)",
        "coordinates": {"latitude": 43.7711, "longitude": 11.2486},
        "size": "Medium (4-6 lbs)",
        "temperament": "Active, nervous, flighty",
        "egg_production": "280-320 eggs per year",
        "lifespan": "4-6 years",
        "purpose": "Egg production",
        "colors": ["White", "Brown", "Black", "Buff", "Silver"],
        "image_url": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcSk_mG8DPfn_7qVAxz038iLzFbSPetd2bpGSA&s",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Leghorn_chicken",
        "description": "Leghorns are a Mediterranean breed originating from Italy. They are the world's most prolific egg layers, with some hens producing over 300 large white eggs per year. Despite their smaller size, they are incredibly feed-efficient.",
        "habitat": "Leghorns prefer warm climates but can adapt to various conditions. They are excellent foragers and do best with plenty of space to roam. These active birds can fly well and may need higher fencing. They tolerate confinement but are happiest when free-ranging."
    },
    "Silkie": {
        "id": "silkie",
        "origin": "China",
        "coordinates": {"latitude": 35.8617, "longitude": 104.1954},
        "size": "Small (2-3 lbs)",
        "temperament": "Docile, friendly, calm",
        "egg_production": "100-120 eggs per year",
        "lifespan": "7-9 years",
        "purpose": "Ornamental, brooding",
        "colors": ["White", "Black", "Blue", "Splash", "Partridge", "Gray", "Buff"],
        "image_url": "https://images.unsplash.com/photo-1612170153139-6f881ff067e0",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Silkie",
        "description": "Silkie chickens are an ancient breed from China, known for their incredibly soft, fluffy plumage that feels like silk or fur. They have black skin and bones, five toes, and distinctive turquoise earlobes. Silkies are beloved for their gentle nature.",
        "habitat": "Silkies adapt well to various climates but need protection from wet conditions as their fluffy feathers aren't waterproof. They do well in smaller spaces and are perfect for urban settings. These birds cannot fly and need lower perches. They thrive in covered runs."
    },
    "Plymouth Rock": {
        "id": "plymouth-rock",
        "origin": "United States (Massachusetts)",
        "coordinates": {"latitude": 42.3601, "longitude": -71.0589},
        "size": "Large (7.5-9.5 lbs)",
        "temperament": "Calm, friendly, easy-going",
        "egg_production": "200-280 eggs per year",
        "lifespan": "6-8 years",
        "purpose": "Dual-purpose (meat and eggs)",
        "colors": ["Barred", "White", "Buff", "Silver Penciled", "Partridge", "Columbian", "Blue"],
        "image_url": "https://cdn.shopify.com/s/files/1/1407/3744/articles/DSC_9544.jpg?v=1715880318",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Plymouth_Rock_chicken",
        "description": "Plymouth Rock chickens, especially the Barred variety, are an iconic American breed. Known for their distinctive black and white striped plumage, they are calm, friendly birds that make excellent backyard chickens for families.",
        "habitat": "Plymouth Rocks are hardy birds that adapt to various climates and environments. They do well in cold weather due to their dense feathering. These chickens are content in confinement but enjoy free-ranging. They're perfect for small farms and backyard settings."
    },
    "Brahma": {
        "id": "brahma",
        "origin": "United States (developed from Shanghai birds)",
        "coordinates": {"latitude": 40.7128, "longitude": -74.0060},
        "size": "Extra Large (10-18 lbs)",
        "temperament": "Gentle, calm, friendly",
        "egg_production": "150-200 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Dual-purpose (meat and eggs)",
        "colors": ["Light", "Dark", "Buff"],
        "image_url": "https://www.somerzby.com.au/wp-content/uploads/2019/04/Large-Black-and-White-Brahma-Pair.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Brahma_chicken",
        "description": "Brahma chickens are gentle giants of the poultry world, with roosters reaching up to 18 pounds. Despite their imposing size, they are known for their calm temperament. These feather-footed beauties excel in cold climates.",
        "habitat": "Brahmas thrive in cold climates thanks to their dense feathering and small pea combs that resist frostbite. They need spacious coops due to their large size but don't require high fencing as they can't fly. These gentle giants do well in confinement and are perfect for northern regions."
    },
    "Orpington": {
        "id": "orpington",
        "origin": "United Kingdom (Kent)",
        "coordinates": {"latitude": 51.2787, "longitude": 0.5217},
        "size": "Large (8-10 lbs)",
        "temperament": "Gentle, docile, friendly",
        "egg_production": "200-280 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Dual-purpose (meat and eggs)",
        "colors": ["Buff", "Black", "White", "Blue", "Lavender"],
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/3/32/Buff_Orpington_chicken%2C_UK.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Orpington_chicken",
        "description": "Orpingtons are large, friendly birds developed in England by William Cook in the 1880s. These fluffy, round chickens are known for their exceptional cold hardiness, calm disposition, and excellent mothering abilities. Their dense feathering makes them appear even larger than they are.",
        "habitat": "Orpingtons adapt well to confinement and free-range conditions. Their heavy feathering makes them excellent for cold climates but may struggle in extreme heat. They need sturdy coops due to their size and prefer lower roosts as they're poor fliers."
    },
    "Australorp": {
        "id": "australorp",
        "origin": "Australia",
        "coordinates": {"latitude": -25.2744, "longitude": 133.7751},
        "size": "Large (6.5-8.5 lbs)",
        "temperament": "Quiet, gentle, friendly",
        "egg_production": "250-300 eggs per year",
        "lifespan": "6-10 years",
        "purpose": "Dual-purpose (eggs primarily)",
        "colors": ["Black", "Blue", "White"],
        "image_url": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcSK866KNEACe1viNkEnC4mFhN7Qp-chZaJxqw&s",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Australorp",
        "description": "Australorps hold world records for egg production, with one hen laying 364 eggs in 365 days! Developed in Australia from Black Orpingtons, these glossy black birds with green-purple sheen are incredibly productive while maintaining a calm, friendly demeanor.",
        "habitat": "Australorps are highly adaptable, thriving in both hot and cold climates. They do well in confinement but love to forage when free-ranging. These quiet birds are perfect for urban and suburban settings with noise restrictions."
    },
    "Wyandotte": {
        "id": "wyandotte",
        "origin": "United States (New York)",
        "coordinates": {"latitude": 43.0481, "longitude": -76.1474},
        "size": "Large (6-9 lbs)",
        "temperament": "Calm, friendly, assertive",
        "egg_production": "180-260 eggs per year",
        "lifespan": "6-12 years",
        "purpose": "Dual-purpose (meat and eggs)",
        "colors": ["Silver Laced", "Golden Laced", "Blue", "Black", "White", "Buff", "Partridge", "Columbian"],
        "image_url": "https://images.unsplash.com/photo-1556316918-880f9e893822",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Wyandotte_chicken",
        "description": "Wyandottes are stunning American birds known for their beautiful laced feather patterns and rose combs. Created in the 1870s, they're excellent dual-purpose birds that lay well through winter. Their rose combs make them particularly cold-hardy.",
        "habitat": "Wyandottes excel in cold climates thanks to their rose combs and dense feathering. They're good foragers but adapt well to confinement. These birds are known for being excellent winter layers when other breeds slow down."
    },
    "Polish": {
        "id": "polish",
        "origin": "Netherlands/Poland",
        "coordinates": {"latitude": 52.1326, "longitude": 5.2913},
        "size": "Medium (4.5-6 lbs)",
        "temperament": "Gentle, flighty, quirky",
        "egg_production": "150-200 eggs per year",
        "lifespan": "7-8 years",
        "purpose": "Ornamental and eggs",
        "colors": ["White Crested Black", "Golden", "Silver", "Buff Laced", "White", "Black"],
        "image_url": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQMdCUJuFqHRI-twL9T1lYhxoadWxuHBWyGvA&s",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Polish_chicken",
        "description": "Polish chickens are the comedians of the poultry world with their extraordinary feather crests that often cover their eyes! Despite their name, they likely originated in the Netherlands. These ornamental birds are gentle and make great pets.",
        "habitat": "Polish chickens need special care due to their crests blocking vision. They do best in covered runs to protect their head feathers from rain. These birds startle easily and need calm environments with lower perches."
    },
    "Ameraucana": {
        "id": "ameraucana",
        "origin": "United States",
        "coordinates": {"latitude": 39.8283, "longitude": -98.5795},
        "size": "Medium (5-7 lbs)",
        "temperament": "Friendly, curious, active",
        "egg_production": "200-250 eggs per year",
        "lifespan": "7-10 years",
        "purpose": "Egg production (blue eggs)",
        "colors": ["Black", "Blue", "Brown Red", "Buff", "Silver", "Wheaten", "White"],
        "image_url": "https://static.wixstatic.com/media/222cc3_b60ec4e4e95b44eea6390358f99d5422~mv2.jpg/v1/fill/w_568,h_378,al_c,q_80,usm_0.66_1.00_0.01,enc_avif,quality_auto/222cc3_b60ec4e4e95b44eea6390358f99d5422~mv2.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Ameraucana",
        "description": "Ameraucanas are famous for laying beautiful blue eggs! Developed in the 1970s from Araucanas, they have distinctive muffs and beards. These hardy birds are excellent foragers and add colorful eggs to any basket.",
        "habitat": "Ameraucanas are extremely hardy, adapting to both hot and cold climates. They're active foragers who do best with room to roam but can tolerate confinement. Their pea combs resist frostbite in winter."
    },
    "Cochin": {
        "id": "cochin",
        "origin": "China (Shanghai)",
        "coordinates": {"latitude": 31.2304, "longitude": 121.4737},
        "size": "Giant (8.5-11 lbs)",
        "temperament": "Calm, friendly, docile",
        "egg_production": "150-180 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Ornamental and brooding",
        "colors": ["Buff", "Partridge", "White", "Black", "Blue", "Golden Laced", "Silver Laced"],
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/4/47/Partridge_Cochin_cockerel_%28cropped%29.jpg/1200px-Partridge_Cochin_cockerel_%28cropped%29.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Cochin_chicken",
        "description": "Cochins are gentle giants with feathers covering even their feet! Imported from China in the 1840s, they sparked 'Hen Fever' in America and Europe. These massive, fluffy birds are more pets than production birds but make excellent mothers.",
        "habitat": "Cochins need spacious, dry coops due to their size and feathered feet. They're poor fliers and need low roosts. Their foot feathering requires dry conditions to prevent problems. They're extremely cold-hardy but struggle in heat."
    },
    "Marans": {
        "id": "marans",
        "origin": "France (Marans)",
        "coordinates": {"latitude": 46.0833, "longitude": -1.0833},
        "size": "Large (7-8 lbs)",
        "temperament": "Active, friendly, quiet",
        "egg_production": "150-200 eggs per year",
        "lifespan": "6-8 years",
        "purpose": "Dual-purpose (dark eggs)",
        "colors": ["Black Copper", "Blue Copper", "Wheaten", "Black", "White", "Cuckoo"],
        "image_url": "https://cdn.shopify.com/s/files/1/1007/8326/files/Black-Copper-Marans-Hen.webp?v=1737263713",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Marans",
        "description": "Marans are French chickens famous for laying the darkest brown eggs of any breed - often described as chocolate-colored! Developed in the marshy areas of Marans, these birds are robust, active foragers with striking copper and black plumage.",
        "habitat": "Marans thrive in free-range conditions and are excellent foragers. They adapt well to various climates but prefer moderate conditions. These active birds need space to roam and can be kept in wet conditions better than most breeds."
    },
    "Barnevelder": {
        "id": "barnevelder",
        "origin": "Netherlands (Barneveld)",
        "coordinates": {"latitude": 52.1384, "longitude": 5.5869},
        "size": "Large (6-7 lbs)",
        "temperament": "Calm, friendly, active",
        "egg_production": "180-200 eggs per year",
        "lifespan": "4-7 years",
        "purpose": "Egg production (brown eggs)",
        "colors": ["Double Laced", "Black", "White", "Blue Double Laced", "Partridge"],
        "image_url": "https://www.chickencoopcompany.com/cdn/shop/files/Barnevelder_1.jpg?v=1724563615&width=800",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Barnevelder",
        "description": "Barnevelders are Dutch chickens known for their beautiful double-laced feather pattern and dark brown eggs. These hardy birds were developed for egg production and continue laying well through winter months.",
        "habitat": "Barnevelders are cold-hardy birds that adapt well to confinement but enjoy foraging. They tolerate wet conditions better than many breeds and are excellent for temperate climates. These calm birds are perfect for backyard flocks."
    },
    "Hamburg": {
        "id": "hamburg",
        "origin": "Netherlands/Germany",
        "coordinates": {"latitude": 53.5511, "longitude": 9.9937},
        "size": "Small (4-5 lbs)",
        "temperament": "Active, flighty, alert",
        "egg_production": "200-250 eggs per year",
        "lifespan": "8-10 years",
        "purpose": "Egg production",
        "colors": ["Silver Spangled", "Golden Spangled", "Golden Penciled", "Silver Penciled", "Black", "White"],
        "image_url": "https://livestockconservancy.org/wp-content/uploads/2022/08/Hamburgs.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Hamburg_chicken",
        "description": "Hamburgs are alert, active chickens nicknamed 'everyday layers' for their prolific egg production. Despite their name, they originated in Holland. These elegant birds with rose combs are excellent fliers and love to roost in trees.",
        "habitat": "Hamburgs need space to roam and high fencing as they fly well. They prefer free-range conditions and often roost in trees if allowed. These hardy birds tolerate cold well but are too active for close confinement."
    },
    "Faverolles": {
        "id": "faverolles",
        "origin": "France (Faverolles)",
        "coordinates": {"latitude": 48.3833, "longitude": 3.0167},
        "size": "Large (6.5-8 lbs)",
        "temperament": "Docile, gentle, curious",
        "egg_production": "180-240 eggs per year",
        "lifespan": "5-7 years",
        "purpose": "Dual-purpose",
        "colors": ["Salmon", "White", "Black", "Blue", "Buff", "Cuckoo"],
        "image_url": "https://cdn.shopify.com/s/files/1/0039/4647/9689/files/faverolle-hen-and-chicks.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Faverolles_chicken",
        "description": "Faverolles are French chickens with distinctive fluffy beards, muffs, and five toes! The Salmon variety has stunning coloring. These gentle giants are excellent winter layers and make wonderful family pets with their docile, comical personalities.",
        "habitat": "Faverolles adapt well to confinement and are perfect for small spaces. Their feathered feet require dry conditions. These calm birds are cold-hardy but need shade in summer. They're poor fliers and need low perches."
    },
    "Campine": {
        "id": "campine",
        "origin": "Belgium (Campine region)",
        "coordinates": {"latitude": 51.3167, "longitude": 5.0333},
        "size": "Small (4-6 lbs)",
        "temperament": "Active, independent, flighty",
        "egg_production": "150-200 eggs per year",
        "lifespan": "7-10 years",
        "purpose": "Egg production",
        "colors": ["Silver", "Golden"],
        "image_url": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQnd5TjQosIrqIsvgxHnwDDgakFJTWbu3vmTA&s",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Campine_chicken",
        "description": "Campines are ancient Belgian chickens with striking penciled plumage. These active, alert birds are excellent foragers and lay white eggs consistently. They're known for their intelligence and independence.",
        "habitat": "Campines need plenty of space to forage and fly. They don't tolerate confinement well and prefer free-range conditions. These hardy birds adapt to various climates but need secure fencing as they're excellent fliers."
    },
    "Minorca": {
        "id": "minorca",
        "origin": "Spain (Menorca)",
        "coordinates": {"latitude": 39.9496, "longitude": 4.1104},
        "size": "Large (7.5-9 lbs)",
        "temperament": "Active, alert, friendly",
        "egg_production": "200-280 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Egg production (large eggs)",
        "colors": ["Black", "White", "Blue"],
        "image_url": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQdALCpgJKk0BYMmhm65xLSUfXE1tvXuFPrLQ&s",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Minorca_chicken",
        "description": "Minorcas are Mediterranean chickens with enormous white earlobes and impressive large white eggs. These elegant black birds with glossy green sheen are heat-tolerant and active. Roosters have spectacular large single combs.",
        "habitat": "Minorcas thrive in warm climates but need protection from frostbite on their large combs in winter. They're excellent foragers who prefer free-range but tolerate confinement. These active birds need high roosts as they fly well."
    },
    "Jersey Giant": {
        "id": "jersey-giant",
        "origin": "United States (New Jersey)",
        "coordinates": {"latitude": 40.0583, "longitude": -74.4057},
        "size": "Giant (11-15 lbs)",
        "temperament": "Gentle, calm, docile",
        "egg_production": "150-200 eggs per year",
        "lifespan": "6-10 years",
        "purpose": "Meat production primarily",
        "colors": ["Black", "White", "Blue"],
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/7/7f/OntarioCountyFair2018JerseyGiantCockerel.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Jersey_Giant",
        "description": "Jersey Giants are the world's largest chicken breed, with roosters reaching 15 pounds! Developed in New Jersey to replace turkeys, these gentle giants take 6-8 months to mature. Despite their size, they're calm and friendly.",
        "habitat": "Jersey Giants need extra-large coops with sturdy, low roosts due to their weight. They tolerate cold well but need shade in summer. These calm birds do well in confinement but enjoy foraging. Strong fencing is needed as they're heavy."
    },
    "Andalusian": {
        "id": "andalusian",
        "origin": "Spain (Andalusia)",
        "coordinates": {"latitude": 37.5443, "longitude": -4.7278},
        "size": "Medium (5-7 lbs)",
        "temperament": "Active, noisy, independent",
        "egg_production": "160-200 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Egg production",
        "colors": ["Blue", "Black", "Splash"],
        "image_url": "https://cluckin.net/media/posts/59/Blue-Andalusian-Chicken-header-image.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Andalusian_chicken",
        "description": "Andalusians are stunning Spanish chickens with unique blue plumage created by a dilution gene. These active, hardy birds are excellent layers of large white eggs. They're known for being noisy but productive.",
        "habitat": "Andalusians thrive in warm climates and are heat-tolerant. They're active foragers who need space and don't do well in confinement. These excellent fliers need tall fencing and prefer to roost high."
    },
    "Welsummer": {
        "id": "welsummer",
        "origin": "Netherlands (Welsum)",
        "coordinates": {"latitude": 52.3333, "longitude": 6.0833},
        "size": "Medium (6-7 lbs)",
        "temperament": "Friendly, intelligent, active",
        "egg_production": "160-250 eggs per year",
        "lifespan": "6-9 years",
        "purpose": "Dual-purpose (dark eggs)",
        "colors": ["Red Partridge", "Silver Duckwing", "Gold Duckwing"],
        "image_url": "https://img.hobbyfarms.com/wp-content/uploads/2011/02/12132754/welsummer-SarahIvy-flickr.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Welsummer",
        "description": "Welsummers are Dutch chickens famous for laying beautiful terracotta-colored eggs with dark speckles. The Kellogg's Corn Flakes rooster is modeled after a Welsummer! These intelligent birds are excellent foragers.",
        "habitat": "Welsummers are hardy birds that adapt to various climates. They're excellent free-range chickens but tolerate confinement. These intelligent birds are good at avoiding predators and prefer having space to forage."
    },
    "Serama": {
        "id": "serama",
        "origin": "Malaysia",
        "coordinates": {"latitude": 4.2105, "longitude": 101.9758},
        "size": "Bantam (0.5-1.5 lbs)",
        "temperament": "Friendly, confident, personable",
        "egg_production": "100-180 eggs per year",
        "lifespan": "5-7 years",
        "purpose": "Ornamental and pets",
        "colors": ["White", "Black", "Blue", "Wheaten", "Mille Fleur", "Various"],
        "image_url": "https://img.hobbyfarms.com/serama.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Serama",
        "description": "Seramas are the world's smallest chicken breed, with some weighing less than a pound! These Malaysian bantams have upright posture, puffed chests, and vertical tail feathers. Despite their size, they're confident and friendly.",
        "habitat": "Seramas need protection from cold and wet weather due to their small size. They're perfect for indoor keeping or small urban spaces. These tiny birds can't defend themselves from predators and need secure housing."
    },
    "Araucana": {
        "id": "araucana",
        "origin": "Chile",
        "coordinates": {"latitude": -35.6751, "longitude": -71.5430},
        "size": "Medium (5-7 lbs)",
        "temperament": "Active, friendly, alert",
        "egg_production": "150-180 eggs per year",
        "lifespan": "6-8 years",
        "purpose": "Egg production (blue eggs)",
        "colors": ["Black", "Black Red", "Golden Duckwing", "Silver Duckwing", "White"],
        "image_url": "https://homesteadontherange.com/wp-content/uploads/2021/04/e2c4e-araucana2-resized.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Araucana",
        "description": "Araucanas are the original blue egg layers from Chile, known for their unique rumpless (tailless) appearance and ear tufts. These rare birds are the ancestors of Ameraucanas and Easter Eggers. They're hardy and active foragers.",
        "habitat": "Araucanas are extremely hardy and adapt to various climates. They're excellent foragers who prefer free-range conditions. Being rumpless affects their balance, so they need lower perches. These active birds are good at predator evasion."
    },
    "Speckled Sussex": {
        "id": "speckled-sussex",
        "origin": "United Kingdom (Sussex)",
        "coordinates": {"latitude": 50.8650, "longitude": -0.0885},
        "size": "Large (7-8 lbs)",
        "temperament": "Curious, friendly, docile",
        "egg_production": "200-250 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Dual-purpose",
        "colors": ["Speckled (mahogany with white tips)"],
        "image_url": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcTM8Q6PxOWi1a90gJ5J5ZSHZRSE5wg6w4GpHw&s",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Sussex_chicken",
        "description": "Speckled Sussex are beautiful British birds with mahogany feathers tipped in white, creating a speckled appearance that gets more pronounced with each molt. These curious, friendly chickens are excellent foragers and cold-hardy.",
        "habitat": "Speckled Sussex thrive in free-range environments where their camouflage coloring helps protect them. They're cold-hardy and adapt well to confinement. These docile birds are perfect for families and mix well with other breeds."
    },
    "Buckeye": {
        "id": "buckeye",
        "origin": "United States (Ohio)",
        "coordinates": {"latitude": 40.4173, "longitude": -82.9071},
        "size": "Large (6.5-9 lbs)",
        "temperament": "Friendly, active, curious",
        "egg_production": "180-260 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Dual-purpose",
        "colors": ["Deep mahogany red"],
        "image_url": "https://www.cacklehatchery.com/wp-content/uploads/2015/01/Buckeye-Hen-Cackle-1.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Buckeye_chicken",
        "description": "Buckeyes are the only American breed developed entirely by a woman (Nettie Metcalf). These deep red chickens from Ohio are extremely cold-hardy with pea combs. They're known for their friendly disposition and mouse-hunting abilities!",
        "habitat": "Buckeyes excel in cold climates with their pea combs and dense feathering. They're active foragers who thrive in free-range settings. These adaptable birds tolerate confinement but prefer space to hunt and forage."
    },
    "Langshan": {
        "id": "langshan",
        "origin": "China (Langshan district)",
        "coordinates": {"latitude": 32.0617, "longitude": 120.8658},
        "size": "Large (7-10 lbs)",
        "temperament": "Gentle, calm, intelligent",
        "egg_production": "150-200 eggs per year",
        "lifespan": "6-8 years",
        "purpose": "Dual-purpose",
        "colors": ["Black", "White", "Blue"],
        "image_url": "https://livestockconservancy.org/wp-content/uploads/2022/08/langshan-pullet.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Langshan_chicken",
        "description": "Langshans are tall, elegant Chinese chickens with distinctive long legs and deep bodies. These ancient birds have soft, close-fitting plumage and lay eggs with a unique plum bloom. They're gentle giants with excellent flying abilities despite their size.",
        "habitat": "Langshans adapt well to various climates and are particularly cold-hardy. Despite their size, they fly well and need tall fencing. These calm birds do well in confinement but enjoy foraging. They need spacious coops due to their height."
    },
    "Cream Legbar": {
        "id": "cream-legbar",
        "origin": "United Kingdom (Cambridge)",
        "coordinates": {"latitude": 52.2053, "longitude": 0.1218},
        "size": "Medium (5.5-7.5 lbs)",
        "temperament": "Active, friendly, curious",
        "egg_production": "180-200 eggs per year",
        "lifespan": "5-7 years",
        "purpose": "Egg production (blue eggs)",
        "colors": ["Cream with gray barring"],
        "image_url": "https://images.squarespace-cdn.com/content/v1/56c89f3c22482e3c93f7d3cb/1641409983679-MQHCCGF20WXFEF045736/CAR_1656.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Cream_Legbar",
        "description": "Cream Legbars are British auto-sexing chickens that lay beautiful sky-blue eggs! Developed at Cambridge University, chicks can be sexed at hatching by their markings. These crested birds are active, friendly, and excellent foragers.",
        "habitat": "Cream Legbars are hardy birds that adapt to various climates. They're excellent foragers who prefer free-range but tolerate confinement. These active birds fly well and need secure fencing. They're perfect for those wanting blue eggs."
    },
    "Dominique": {
        "id": "dominique",
        "origin": "United States (Colonial America)",
        "coordinates": {"latitude": 38.5616, "longitude": -77.4501},
        "size": "Medium (5-7 lbs)",
        "temperament": "Calm, gentle, reliable",
        "egg_production": "230-275 eggs per year",
        "lifespan": "6-8 years",
        "purpose": "Dual-purpose",
        "colors": ["Barred (black and white)"],
        "image_url": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcRNIYSlfD9MiXCTNHCzi0ZoYQenRG2tml-XCQ&s",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Dominique_chicken",
        "description": "Dominiques are America's oldest chicken breed, dating to colonial times. These barred birds were nearly extinct but have made a comeback. They're excellent foragers, cold-hardy, and known for their calm temperament and hawk-like barring pattern.",
        "habitat": "Dominiques are incredibly hardy and thrive in harsh conditions. They're excellent free-range birds but adapt to confinement. Their rose combs make them frost-resistant. These resourceful birds are perfect for sustainable farming."
    },
    "Egyptian Fayoumi": {
        "id": "egyptian-fayoumi",
        "origin": "Egypt (Fayoum)",
        "coordinates": {"latitude": 29.3084, "longitude": 30.8428},
        "size": "Small (3.5-4.5 lbs)",
        "temperament": "Active, flighty, independent",
        "egg_production": "150-220 eggs per year",
        "lifespan": "5-7 years",
        "purpose": "Egg production",
        "colors": ["Silver Penciled"],
        "image_url": "https://pictureanimal.com/wiki-image/1080/387828133726519296.jpeg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Fayoumi",
        "description": "Fayoumis are ancient Egyptian chickens that have been raised along the Nile for thousands of years. These silver-penciled birds are incredibly disease-resistant, heat-tolerant, and mature quickly. They're wild-acting but efficient foragers.",
        "habitat": "Fayoumis excel in hot, dry climates and are extremely heat-tolerant. They're independent foragers who need space and don't do well in confinement. These flighty birds roost in trees and need tall fencing. They're very predator-aware."
    },
    "La Fleche": {
        "id": "la-fleche",
        "origin": "France (La Fleche)",
        "coordinates": {"latitude": 47.6981, "longitude": -0.0761},
        "size": "Large (6.5-8 lbs)",
        "temperament": "Active, wild, aloof",
        "egg_production": "150-200 eggs per year",
        "lifespan": "6-8 years",
        "purpose": "Dual-purpose (gourmet meat)",
        "colors": ["Black with green sheen"],
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/0/09/Poule_de_La_Fl√®che_%28cropped%29.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/La_Fleche_chicken",
        "description": "La Fleche are rare French chickens known as 'Devil Birds' due to their distinctive V-shaped combs that look like horns! These black birds with metallic green sheen are excellent layers and were once considered the finest table fowl in France.",
        "habitat": "La Fleche chickens prefer moderate climates and need protection from extreme cold due to their unique combs. They're active foragers who don't tolerate confinement well. These excellent fliers need very tall fencing or covered runs."
    },
    "Houdan": {
        "id": "houdan",
        "origin": "France (Houdan)",
        "coordinates": {"latitude": 48.7906, "longitude": 1.6005},
        "size": "Large (6-8 lbs)",
        "temperament": "Docile, sweet, gentle",
        "egg_production": "150-230 eggs per year",
        "lifespan": "7-8 years",
        "purpose": "Dual-purpose and ornamental",
        "colors": ["Mottled (black and white)", "White", "Black"],
        "image_url": "https://www.mcmurrayhatchery.com/images/global/mc/McMurrayHatchery-Mottled-Houdan.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Houdan_chicken",
        "description": "Houdans are ornamental French chickens with spectacular crests, beards, muffs, and five toes! Dating to the 1200s, these mottled birds were once France's premier meat bird. Their crests often need trimming to help them see.",
        "habitat": "Houdans need special care due to their vision-blocking crests. They do best in covered, predator-proof runs. These docile birds tolerate confinement well but enjoy foraging. Their foot feathering requires dry conditions."
    },
    "Yokohama": {
        "id": "yokohama",
        "origin": "Japan (developed in Germany)",
        "coordinates": {"latitude": 35.4437, "longitude": 139.6380},
        "size": "Small (4-5.5 lbs)",
        "temperament": "Active, gentle, ornamental",
        "egg_production": "80-100 eggs per year",
        "lifespan": "5-7 years",
        "purpose": "Ornamental exhibition",
        "colors": ["Red Saddled", "White", "Black-Red", "Silver Duckwing"],
        "image_url": "https://livestockconservancy.org/wp-content/uploads/2022/08/red-shouldered-yokohama-cockerel-2.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Yokohama_chicken",
        "description": "Yokohamas are ornamental Japanese chickens famous for their extraordinarily long tail feathers that can grow several feet long! These elegant birds have walnut combs and pheasant-like appearance. They require special housing to protect their tails.",
        "habitat": "Yokohamas need specialized housing with high perches and clean conditions to protect their long tails. They're active foragers but need protection from wet, muddy conditions. These birds do best in dry climates with spacious aviaries."
    },
    "Buff Brahma": {
        "id": "buff-brahma",
        "origin": "United States",
        "coordinates": {"latitude": 40.7128, "longitude": -74.0060},
        "size": "Extra Large (10-12 lbs)",
        "temperament": "Extremely gentle, calm, friendly",
        "egg_production": "150-200 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Dual-purpose and pets",
        "colors": ["Buff with darker accents"],
        "image_url": "https://www.mypetchicken.com/cdn/shop/products/buff-brahma-chicken2-mpc.jpg?v=1735939732&width=1946",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Brahma_chicken",
        "description": "Buff Brahmas are a color variety of the gentle giant Brahma breed. These massive, docile birds have beautiful buff-colored plumage with darker hackles and tail feathers. Their feathered feet and calm nature make them excellent pets.",
        "habitat": "Buff Brahmas excel in cold climates with their heavy feathering and pea combs. They need spacious coops due to their large size but are content in confinement. These gentle birds are perfect for families with children."
    },
    "Olive Egger": {
        "id": "olive-egger",
        "origin": "United States (Hybrid)",
        "coordinates": {"latitude": 39.8283, "longitude": -98.5795},
        "size": "Medium (5-7 lbs)",
        "temperament": "Friendly, active, curious",
        "egg_production": "180-250 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Egg production (olive eggs)",
        "colors": ["Various mixed patterns"],
        "image_url": "https://images.north40.com/images/1999397/BA_olive_egger__1999397__.jpg?width=900&format=pjpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Easter_Egger",
        "description": "Olive Eggers are hybrid chickens bred specifically to lay olive-colored eggs. Created by crossing blue egg layers with dark brown egg layers, these birds produce eggs in various shades of olive green, making them highly sought after.",
        "habitat": "Olive Eggers are hardy hybrids that adapt to various climates. They're active foragers who do well in free-range settings but tolerate confinement. These friendly birds are perfect for colorful egg baskets."
    },
    "Black Copper Marans": {
        "id": "black-copper-marans",
        "origin": "France",
        "coordinates": {"latitude": 46.0833, "longitude": -1.0833},
        "size": "Large (7-8 lbs)",
        "temperament": "Active, friendly, alert",
        "egg_production": "150-200 eggs per year",
        "lifespan": "6-8 years",
        "purpose": "Dual-purpose (dark eggs)",
        "colors": ["Black with copper neck"],
        "image_url": "https://i0.wp.com/sunbirdfarms.com/wp-content/uploads/2016/01/DSC04045.jpg?fit=4592%2C2576&ssl=1",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Marans",
        "description": "Black Copper Marans are the most prized variety of Marans, known for laying the darkest chocolate-brown eggs. These French birds have glossy black plumage with striking copper hackles on roosters, making them both beautiful and productive.",
        "habitat": "Black Copper Marans are hardy birds that thrive in free-range conditions. They tolerate wet weather better than most breeds and are excellent foragers. These active birds prefer space but adapt to confinement."
    },
    "Sapphire Gem": {
        "id": "sapphire-gem",
        "origin": "Czech Republic (Hybrid)",
        "coordinates": {"latitude": 49.7500, "longitude": 15.5000},
        "size": "Medium (5-6 lbs)",
        "temperament": "Calm, friendly, easy-going",
        "egg_production": "280-300 eggs per year",
        "lifespan": "4-6 years",
        "purpose": "Egg production",
        "colors": ["Blue-gray, lavender"],
        "image_url": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcSXzJTea9AH76suNNOzdySpzWFETOOpKCIatQ&s",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Sex_link",
        "description": "Sapphire Gems are sex-linked hybrid chickens that are excellent egg layers. These blue-gray birds can be sexed at hatching, with males being lighter than females. They're known for consistent production of large brown eggs.",
        "habitat": "Sapphire Gems are adaptable hybrids that thrive in various climates. They're excellent foragers but do well in confinement. These hardy birds are perfect for beginners wanting reliable egg production."
    },
    "Ayam Cemani": {
        "id": "ayam-cemani",
        "origin": "Indonesia (Java)",
        "coordinates": {"latitude": -7.6145, "longitude": 110.7122},
        "size": "Medium (4-6 lbs)",
        "temperament": "Active, alert, intelligent",
        "egg_production": "80-120 eggs per year",
        "lifespan": "6-8 years",
        "purpose": "Ornamental and meat",
        "colors": ["Solid black (hyperpigmentation)"],
        "image_url": "https://www.backyardchickens.com/articles/ayam-cemani-facts-you-didnt-know.72991/cover-image",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Ayam_Cemani",
        "description": "Ayam Cemani are the world's most unique chickens, completely black inside and out - including organs, bones, and meat! These rare Indonesian birds are considered mystical in their homeland and are among the most expensive chickens globally.",
        "habitat": "Ayam Cemani prefer warm climates but adapt to various conditions with proper shelter. They're active foragers who need space to roam. These exotic birds require secure housing as they're valuable and attract attention."
    },
    "Bielefelder": {
        "id": "bielefelder",
        "origin": "Germany (Bielefeld)",
        "coordinates": {"latitude": 52.0306, "longitude": 8.5324},
        "size": "Large (8-10 lbs)",
        "temperament": "Gentle, calm, friendly",
        "egg_production": "200-280 eggs per year",
        "lifespan": "6-10 years",
        "purpose": "Dual-purpose",
        "colors": ["Crele (barred red-brown)"],
        "image_url": "https://i0.wp.com/www.happywifeacres.com/wp-content/uploads/2021/05/word-image-1.jpeg?resize=740%2C497&ssl=1",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Bielefelder_chicken",
        "description": "Bielefelders are auto-sexing German chickens that combine beauty, size, and productivity. Chicks can be sexed at hatching by their markings. These gentle giants lay large brown eggs and have stunning crele plumage patterns.",
        "habitat": "Bielefelders are cold-hardy birds that excel in free-range settings. They're calm enough for confinement but prefer foraging. These docile giants are perfect for families wanting friendly, productive chickens."
    },
    "Swedish Flower Hen": {
        "id": "swedish-flower-hen",
        "origin": "Sweden (Sk√•ne)",
        "coordinates": {"latitude": 55.9904, "longitude": 13.5958},
        "size": "Medium (5-7 lbs)",
        "temperament": "Friendly, independent, hardy",
        "egg_production": "150-200 eggs per year",
        "lifespan": "6-10 years",
        "purpose": "Dual-purpose",
        "colors": ["Unique patterns - no two alike"],
        "image_url": "https://thepasturefarms.com/wp-content/uploads/2020/09/Swedish-Flower-Hen-Pullets-scaled.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Swedish_Flower_chicken",
        "description": "Swedish Flower Hens (Sk√•nsk blommeh√∂na) are Sweden's landrace chickens with no two birds looking alike! Each has unique 'flower' patterns. Nearly extinct in the 1970s, these hardy birds are now treasured for their beauty and personality.",
        "habitat": "Swedish Flower Hens are extremely cold-hardy, developed to survive Scandinavian winters. They're excellent foragers who thrive in free-range settings. These independent birds are perfect for harsh climates."
    },
    "Lavender Orpington": {
        "id": "lavender-orpington",
        "origin": "United Kingdom",
        "coordinates": {"latitude": 51.2787, "longitude": 0.5217},
        "size": "Large (8-10 lbs)",
        "temperament": "Very gentle, calm, friendly",
        "egg_production": "175-200 eggs per year",
        "lifespan": "5-8 years",
        "purpose": "Dual-purpose and pets",
        "colors": ["Lavender (self-blue)"],
        "image_url": "https://images.squarespace-cdn.com/content/v1/627d40aafe1d5273d74d7fee/df9398e3-7e39-4b15-afc5-72dee959dfae/Lavender+Chicken+Blog-7.png",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Orpington_chicken",
        "description": "Lavender Orpingtons are a rare color variety with beautiful silvery-lavender plumage. These fluffy, gentle giants maintain all the wonderful Orpington qualities while sporting this unique self-blue coloring that breeds true.",
        "habitat": "Lavender Orpingtons excel in cold climates with their dense feathering. They're content in confinement but enjoy foraging. These docile birds are perfect for families and do well in small spaces."
    },
    "Icelandic": {
        "id": "icelandic",
        "origin": "Iceland",
        "coordinates": {"latitude": 64.9631, "longitude": -19.0208},
        "size": "Small to Medium (3-5.5 lbs)",
        "temperament": "Independent, alert, hardy",
        "egg_production": "180-250 eggs per year",
        "lifespan": "7-12 years",
        "purpose": "Dual-purpose",
        "colors": ["Varied - all colors possible"],
        "image_url": "https://themodernhomestead.us/wp-content/uploads/2021/09/icelandics-in-snow-LR.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Icelandic_chicken",
        "description": "Icelandic chickens are ancient Viking birds brought to Iceland 1,000 years ago. These hardy landrace chickens have survived centuries in harsh conditions, developing incredible foraging abilities and cold resistance.",
        "habitat": "Icelandic chickens are the hardiest breed, thriving in extreme cold and harsh conditions. They're exceptional foragers who need minimal supplemental feed. These independent birds prefer free-range and can be semi-feral."
    },
    "Dong Tao": {
        "id": "dong-tao",
        "origin": "Vietnam (Dong Tao)",
        "coordinates": {"latitude": 20.9804, "longitude": 105.8847},
        "size": "Giant (10-15 lbs)",
        "temperament": "Calm, docile, slow-moving",
        "egg_production": "60-80 eggs per year",
        "lifespan": "5-6 years",
        "purpose": "Meat (delicacy)",
        "colors": ["Red, white, mixed"],
        "image_url": "https://www.horizonstructures.com/wp-content/uploads/2022/09/dong-tao-chicken-red-1024x801.jpg",
        "wikipedia_link": "https://en.wikipedia.org/wiki/Dong_Tao_chicken",
        "description": "Dong Tao chickens from Vietnam are famous for their massive dragon-like legs that can be as thick as a human wrist! Once reserved for royalty, these rare birds are prized for their meat and can cost thousands of dollars.",
        "habitat": "Dong Tao chickens need special housing accommodations for their large feet. They require soft bedding and low perches. These tropical birds need protection from cold and their valuable legs need careful monitoring."
    },
}

DEFAULT_IMAGE_URL = "https://images.unsplash.com/photo-1548550023-2bdb3c5beed7"
DEFAULT_HABITAT = "This breed adapts well to various environments."

CUSTOM_BREED_REQUIRED = [
    "name", "description", "origin", "egg_production",
    "temperament", "size", "purpose", "lifespan",
]


def breed_record(name, info=None):
    """Flatten a catalog entry into a record that carries its own name."""
    record = {"name": name}
    record.update(info if info is not None else BREED_DATA[name])
    return record


def builtin_breeds():
    return [breed_record(name, info) for name, info in BREED_DATA.items()]


def breed_names():
    return list(BREED_DATA)


def find_breed(breed_id, breeds):
    for breed in breeds:
        if breed["id"] == breed_id:
            return breed
    return None


def search_breeds(query, breeds):
    """Case-insensitive substring search over name, description, origin and temperament."""
    q = (query or "").strip().casefold()
    if not q:
        return list(breeds)
    fields = ("name", "description", "origin", "temperament")
    return [b for b in breeds if any(q in str(b.get(f, "")).casefold() for f in fields)]


def _coordinate(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def build_custom_breed(data):
    """
    Build a custom breed record from user-supplied fields.
    Returns (record, missing_fields); record is None when required fields are missing.
    """
    missing = [field for field in CUSTOM_BREED_REQUIRED if not str(data.get(field) or "").strip()]
    if missing:
        return None, missing

    name = data["name"].strip()
    colors = data.get("colors") or []
    if isinstance(colors, str):
        colors = [c.strip() for c in colors.split(",") if c.strip()]

    record = {
        "name": name,
        "id": f"custom-{uuid.uuid4().hex}",
        "origin": data["origin"].strip(),
        "coordinates": {
            "latitude": _coordinate(data.get("latitude")),
            "longitude": _coordinate(data.get("longitude")),
        },
        "size": data["size"].strip(),
        "temperament": data["temperament"].strip(),
        "egg_production": data["egg_production"].strip(),
        "lifespan": data["lifespan"].strip(),
        "purpose": data["purpose"].strip(),
        "colors": colors or [name],
        "image_url": data.get("image_url") or DEFAULT_IMAGE_URL,
        "wikipedia_link": "https://en.wikipedia.org/wiki/" + name.replace(" ", "_") + "_chicken",
        "description": data["description"].strip(),
        "habitat": (data.get("habitat") or "").strip() or DEFAULT_HABITAT,
        "custom": True,
    }
    return record, []
