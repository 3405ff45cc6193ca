"""
Street table for the Waterloo Region service area.
"""

WATERLOO_REGION_STREETS = {
    "kitchener": {
        "postal_prefixes": ("N2G", "N2H", "N2A", "N2B", "N2C", "N2E", "N2M", "N2N", "N2P", "N2R"),
        "streets": (
            # Major streets
            "King Street West", "King Street East", "Victoria Street North", "Victoria Street South",
            "Weber Street North", "Weber Street South", "Frederick Street", "Charles Street West",
            "Charles Street East", "Ottawa Street North", "Ottawa Street South", "Highland Road West",
            "Highland Road East", "Westmount Road East", "Westmount Road West", "Fischer Hallman Road",
            "Homer Watson Boulevard", "Bleams Road", "Courtland Avenue East", "Courtland Avenue West",
            "Kingsway Drive", "Lancaster Street West", "Lancaster Street East", "Duke Street West",
            "Duke Street East", "Queen Street North", "Queen Street South", "Erb Street West",
            "Erb Street East", "Union Street", "Francis Street North", "Francis Street South",
            "Margaret Avenue North", "Margaret Avenue South", "Stirling Avenue North", "Stirling Avenue South",
            "Wilson Avenue", "Benton Street", "Shanley Street", "Cedar Street North", "Cedar Street South",
            "Cameron Street North", "Cameron Street South", "Mill Street", "Water Street North",
            "Water Street South", "Schneider Avenue", "Park Street", "Elm Street", "Pine Street",
            "Oak Street", "Maple Street", "Birch Street", "Willow Street", "Cherry Street",
            # Residential streets
            "Activa Avenue", "Adam Court", "Adelaide Street North", "Ahrens Street West", "Albert Street",
            "Alexandra Avenue", "Alice Avenue", "Allen Street East", "Amanda Street", "Amber Street",
            "Angus Glen Boulevard", "Apple Blossom Lane", "Applewood Crescent", "Arbour Lake Way",
            "Ardelt Avenue", "Arnold Street", "Arthur Street North", "Ashley Street", "Aspen Way",
            "Augusta Street", "Autumn Ridge Trail", "Avondale Avenue North", "Baden Street",
            "Balsam Grove Road", "Barrie Place", "Bayview Drive", "Beechwood Place", "Belmont Avenue West",
            "Belmont Court", "Benchlands Trail", "Benjamin Street", "Bentwood Trail", "Berkshire Drive",
            "Birchwood Drive", "Blazing Star Drive", "Borden Avenue North", "Bridgeport Road East",
            "Bridgeport Road West", "Bright Street", "Brockville Avenue", "Bruce Street", "Brybeck Crescent",
            "Burnett Avenue", "Burton Street", "Butterworth Drive", "Campbell Avenue", "Canterbury Drive",
            "Cardinal Crescent", "Carleton Place", "Carnegie Place", "Caroline Street North", "Castle Kilbride Way",
            "Cathedral Drive", "Cedar Ridge Drive", "Centennial Drive", "Central Street", "Chandler Drive",
            "Chapel Hill Drive", "Charlemagne Boulevard", "Chester Avenue", "Chestnut Street", "Christine Street",
            "Clarence Street East", "Clarendon Avenue", "Clayton Drive", "Clearbrook Drive", "College Street",
            "Collingwood Street", "Colonial Drive", "Columbia Forest Boulevard", "Commonwealth Street",
            "Concord Avenue", "Cooper Street", "Country Hill Drive", "Countryside Drive", "Courtney Crescent",
            "Coventry Road", "Craig Street", "Creditstone Road", "Crescent Drive", "Cricket Street",
            # More comprehensive coverage
            "Dearborn Place", "Deer Run Trail", "Denton Avenue", "Devon Place", "Diana Avenue",
            "Doon Valley Drive", "Driftwood Drive", "Dublin Street North", "Duncan Street", "Dundas Street",
            "Eagle Street North", "Eastforest Trail", "Eastwood Drive", "Edison Drive", "Edna Street",
            "Elgin Street North", "Elizabeth Street", "Ellen Street East", "Elmdale Drive", "Elmira Road North",
            "Emily Street", "Erb Street", "Esther Drive", "Euclid Avenue", "Evans Road", "Exhibition Street",
            "Fairway Road North", "Fairway Road South", "Falcon Drive", "Farnham Gate Road", "Ferndale Avenue",
            "Fife Road", "Fingal Place", "Firestone Drive", "Fischer Hallman Road", "Fletcher Drive",
            "Floyd Avenue", "Forest Glen Road", "Forest Hill Drive", "Fountain Street North", "Franklin Street North",
            "Fraser Avenue", "Fredrick Street", "Freeport Drive", "Galt Avenue", "Garden Valley Drive",
            "Gateway Park Drive", "Georgian Crescent", "Gibbs Crescent", "Gibson Street", "Glasgow Street",
            "Glen Forrest Boulevard", "Goodall Street", "Gordon Street", "Grand River Street North", "Grant Avenue",
            "Green Valley Road", "Greenbrook Drive", "Greenfield Avenue", "Greenway Trail", "Grenadier Drive",
            "Grove Street", "Haida Drive", "Hallman Road", "Halton Place", "Hampshire Way", "Hanson Avenue",
            "Harbourview Drive", "Harrison Street", "Hartwell Way", "Hawkesville Road", "Hayward Avenue",
            "Heather Drive", "Heritage Drive", "Highland Place", "Hillcrest Avenue", "Hillside Drive",
            "Holly Court", "Hope Street West", "Huber Avenue", "Hunter Drive", "Huron Street", "Indian Trail",
            "Industrial Drive", "Ira Needles Boulevard", "Iron Horse Trail", "Irving Street", "Janefield Avenue",
            "John Street West", "Joseph Street", "Jubilee Drive", "Kamal Street", "Kathleen Avenue",
            "Kaysight Place", "Keewatin Street", "Kent Avenue", "Kensington Street", "Kettle Creek Road",
            "Kimbridge Way", "King Street", "Kingswood Drive", "Kitchener Street", "Lackner Boulevard",
            "Lake Louise Drive", "Lakeshore Drive", "Lancaster Street", "Laurelwood Drive", "Lawrence Avenue",
            "Leander Drive", "Lexington Road", "Liberty Street", "Lincoln Road", "Linden Drive",
            "Lorraine Avenue", "Louise Street", "Loyalist Drive", "Lynn Avenue", "MacKenzie Street",
            "Manitou Drive", "Manor Road East", "Maple Grove Road", "Maple Ridge Road", "Marlin Drive",
            "Marsland Drive", "Martha Street", "Mayfair Avenue", "McLennan Park", "Melrose Street",
            "Memorial Avenue", "Merritt Street", "Metropolitan Drive", "Michael Place", "Mill Creek Drive",
            "Millbank Drive", "Miller Avenue", "Millwood Drive", "Montreal Street", "Morgan Avenue",
            "Morrison Road", "Mountainview Road", "Muirfield Drive", "Murray Street", "Musselman Drive",
        ),
    },
    "waterloo": {
        "postal_prefixes": ("N2J", "N2K", "N2L", "N2T", "N2V"),
        "streets": (
            # Major streets
            "University Avenue West", "University Avenue East", "King Street North", "King Street South",
            "Weber Street North", "Weber Street South", "Columbia Street West", "Columbia Street East",
            "Phillip Street", "Regina Street North", "Regina Street South", "Albert Street", "William Street",
            "Erb Street West", "Erb Street East", "Bridgeport Road East", "Bridgeport Road West",
            "Northfield Drive East", "Northfield Drive West", "Fischer Hallman Road", "Ira Needles Boulevard",
            "University Avenue", "Westmount Road", "Beechwood Drive", "Laurel Creek Drive", "Conestogo Street",
            "Caroline Street", "Highland Road", "Lexington Road", "Lincoln Road", "Lodge Street",
            "Lester Street", "Moore Avenue", "Park Street", "Princess Street", "Young Street",
            # Residential and secondary streets
            "Abraham Avenue", "Abrams Court", "Acorn Trail", "Adam Beck Street", "Adelaide Street",
            "Aldershot Close", "Algonquin Boulevard", "Allen Street", "Altona Street", "Amberwood Drive",
            "Amelia Street", "Amphitheatre Row", "Anderson Street", "Andrew Street", "Anson Street",
            "Apple Creek Boulevard", "Applewood Hills", "Arborwood Drive", "Ardmore Avenue", "Arlington Boulevard",
            "Armstrong Street", "Arthur Street", "Ash Street", "Aspen Street", "Atwood Avenue",
            "Augusta Street", "Austin Drive", "Autumn Ridge Trail", "Avondale Avenue", "Baetz Drive",
            "Balsam Creek Drive", "Bancroft Avenue", "Barbara Street", "Barrie Street", "Bearinger Road",
            "Beaver Creek Road", "Beechwood Place", "Belaire Avenue", "Bell Lane", "Belmont Avenue",
            "Benjamin Road", "Benton Street", "Berkshire Drive", "Bernard Avenue", "Biehn Drive",
            "Birch Hill Road", "Birchwood Drive", "Bishop Street North", "Blackburn Street", "Blair Road",
            "Bluebird Drive", "Bluevale Street", "Boardwalk Street", "Bobwhite Place", "Booth Avenue",
            "Borden Avenue", "Botany Hill", "Boxwood Crescent", "Bradford Street", "Brandon Gate Drive",
            "Brant Avenue", "Briar Ridge Road", "Briarfield Drive", "Bridgewater Drive", "Brierdale Road",
            "Brierwood Avenue", "Bristow Creek Drive", "Broadmoor Boulevard", "Broadway Street", "Brookfield Drive",
            "Brookside Drive", "Brubacher Street", "Brunswick Street", "Buck Creek Drive", "Buckthorn Street",
            "Burlington Street", "Byron Street", "Cambridge Street", "Cameron Heights Drive", "Campbell Avenue",
            "Canrobert Street", "Canterbury Drive", "Cardinal Crescent", "Carlton Street", "Carmen's Way",
            "Carnegie Place", "Carriage Lane", "Caryndale Drive", "Cedar Bend Road", "Cedar Creek Drive",
            "Cedarwood Drive", "Centre Street", "Centreville Drive", "Chandler Drive", "Chapel Lane",
            "Charles Street", "Chelsea Court", "Cherry Blossom Road", "Cherry Hill Road", "Chesterfield Avenue",
            "Churchill Drive", "Citation Drive", "Clayfield Avenue", "Clemont Avenue", "Cloverdale Road",
            "Clubhouse Road", "Cobblestone Court", "Colby Drive", "Colonial Drive", "Columbia Forest Boulevard",
            "Columbia Heights", "Coneflower Crescent", "Connie Street", "Conservation Drive", "Copperfield Drive",
            "Cornwall Street", "Corporate Drive", "Country Club Drive", "Country Squire Road", "Countryside Drive",
            "Courtland Avenue", "Coventry Road", "Coyote Run", "Crane Avenue", "Crescent Drive",
            # University area streets
            "Seagram Drive", "Ring Road", "Hagey Boulevard", "Westcourt Place", "Sunview Street",
            "Hickory Street West", "Hickory Street East", "Sunnydale Place", "Marsland Drive",
            "Keats Way", "Shelley Drive", "Byron Street", "Coleridge Court", "Wordsworth Crescent",
            "Shakespeare Drive", "Milton Avenue", "Dryden Avenue", "Pope Street", "Swift Street",
            # Technology area
            "Research and Technology Drive", "Innovation Drive", "Discovery Drive", "Technology Drive",
            "Commerce Drive", "Industrial Drive", "Corporate Campus Drive", "Science Drive",
            "Engineering Drive", "Business Boulevard", "Enterprise Way", "Venture Boulevard",
        ),
    },
    "cambridge": {
        "postal_prefixes": ("N1R", "N1P", "N1S", "N3C", "N3H"),
        "streets": (
            # Major streets
            "Water Street North", "Water Street South", "Main Street", "Hespeler Road", "Franklin Boulevard",
            "Can-Amera Parkway", "Dundas Street North", "Dundas Street South", "King Street East",
            "Fountain Street North", "Fountain Street South", "Grand River Street North", "Grand River Street South",
            "Eagle Street North", "Eagle Street South", "Ainslie Street North", "Ainslie Street South",
            "Concession Road", "Townline Road", "Bishop Street North", "Bishop Street South",
            "Champlain Boulevard", "Myers Road", "Pinebush Road", "Holiday Inn Drive", "Speedsville Road",
            "Shantz Hill Road", "Blair Road", "Langs Drive", "Maple Grove Road", "Riverside Drive",
            # Historic Galt area
            "Dickson Street", "Wellington Street", "Queen's Square", "Argyle Street", "Samuelson Street",
            "Laurel Street", "Mill Street", "Cedar Street", "Rose Street", "Oak Street", "Elm Street",
            "Pine Street", "Maple Street", "Walnut Street", "Cherry Street", "Birch Street",
            "Spruce Street", "Ash Street", "Willow Street", "Chestnut Street", "Poplar Street",
            # Preston area
            "King Street West", "Queen Street West", "Duke Street", "Cambridge Street", "Coronation Boulevard",
            "Winston Boulevard", "Elgin Street", "Victoria Street", "Albert Street", "George Street",
            "Charles Street", "William Street", "John Street", "David Street", "Frederick Street",
            "Henry Street", "James Street", "Robert Street", "Thomas Street", "Michael Street",
            # Hespeler area
            "Guelph Avenue", "Queen Street East", "Tannery Street East", "Tannery Street West",
            "Jacob Street", "Cooper Street", "Galt Avenue", "Simcoe Street", "Dominion Street",
            "Park Street", "Church Street", "School Street", "Station Street", "Mill Run Boulevard",
            "Allendale Road", "Clyde Road", "Beaverdale Road", "Winston Churchill Boulevard",
            "Adamson Street", "Amber Street", "Arnold Street", "Barrie Street", "Beverly Street",
            # Newer developments
            "Pointer Street", "Pointer Street West", "Pointer Crescent", "Pointer Court",
            "Heritage Drive", "Legacy Drive", "Tradition Trail", "Milestone Drive", "Journey Drive",
            "Adventure Place", "Discovery Drive", "Explorer Drive", "Navigator Street", "Compass Rose",
            "Pathfinder Drive", "Pioneer Trail", "Settler's Way", "Founder's Boulevard", "Builder's Court",
            "Designer Way", "Architect Place", "Engineer Court", "Surveyor Street", "Planner Place",
            # Industrial and commercial
            "Jamieson Parkway", "Hespler Road", "Industrial Road", "Commercial Drive", "Business Park Drive",
            "Technology Drive", "Innovation Way", "Enterprise Boulevard", "Manufacturing Drive",
            "Distribution Drive", "Logistics Lane", "Transport Drive", "Freight Street", "Cargo Court",
            # Residential developments
            "Aberdeen Avenue", "Adelaide Street", "Alexander Street", "Alice Street", "Andrew Street",
            "Anne Street", "Arthur Street", "Avenue Road", "Balsam Avenue", "Baxter Street",
            "Bedford Street", "Bell Street", "Berkley Street", "Bernard Avenue", "Blenheim Road",
            "Bond Street", "Bowman Street", "Box Avenue", "Brant Avenue", "Bruce Street",
            "Burns Drive", "Cambridge Drive", "Campbell Avenue", "Carlton Street", "Cedar Creek Road",
            "Centennial Avenue", "Centre Street", "Chambers Avenue", "Chapman Drive", "Charles Street",
            "Christie Street", "Clark Street", "Clive Avenue", "Concord Avenue", "Crescent Road",
            "Crimea Street", "Cross Street", "Cumberland Street", "Dale Avenue", "Daniel Street",
            "Dawson Road", "Doon South Drive", "Douglas Street", "Dumfries Street", "Duncan Street",
            "Dunvegan Road", "Earl Street", "Easton Road", "Edward Street", "Ellis Street",
            "Fairview Street", "Fisher Drive", "Forest Glen Road", "Forest Road", "Franklin Street",
            "Fraser Avenue", "Gibson Street", "Glenwood Avenue", "Gordon Street", "Grace Street",
            "Grand Trunk Avenue", "Grant Avenue", "Greenfield Avenue", "Grove Street", "Haddington Street",
            "Hamilton Street", "Hanover Street", "Harmony Creek Road", "Harrison Street", "Hazel Street",
            "Highland Avenue", "Hill Street", "Hillcrest Avenue", "Hilltop Drive", "Homer Avenue",
            "Hope Street", "Howard Avenue", "Hunter Street", "Industrial Street", "Islington Street",
            "Jane Street", "Jaques Avenue", "Jefferson Avenue", "Johnson Street", "Karn Street",
            "Kent Street", "King Edward Street", "Lakeshore Road", "Lansdowne Avenue", "Laurel Creek Drive",
            "Lawrence Avenue", "Leroy Street", "Lewis Street", "Lincoln Avenue", "Logan Avenue",
            "Louise Street", "Madison Avenue", "Majestic Drive", "Manitoba Street", "Maple Avenue",
            "Margaret Avenue", "Market Street", "Marshall Street", "Martin Street", "McDougall Street",
            "Melran Drive", "Melville Street", "Memorial Drive", "Moffat Street", "Montgomery Road",
            "Morningside Drive", "Muirhead Street", "Nelson Street", "Norman Street", "North Street",
            "Norton Street", "Oak Ridge Road", "Oliver Street", "Ontario Street", "Orchard Street",
            "Oxford Street", "Park Avenue", "Parkside Drive", "Patrick Street", "Paul Avenue",
            "Peel Street", "Peter Street", "Poplar Street", "Princess Street", "Prospect Avenue",
            "Queen Elizabeth Way", "Railway Street", "Regal Road", "Riverside Drive", "Robson Street",
            "Rose Avenue", "Royal Street", "Russell Avenue", "Salisbury Avenue", "Scott Street",
            "Sherwood Avenue", "Simcoe Street", "Smith Street", "South Street", "Speedvale Avenue",
            "St. Andrews Street", "Stanley Street", "Stewart Street", "Stuart Street", "Summit Street",
            "Sunset Boulevard", "Superior Street", "Sycamore Street", "Taylor Street", "Thompson Drive",
            "Trelawney Street", "Vanier Drive", "Victoria Park Road", "Wallace Street", "Ward Street",
            "Watson Street", "Wellington Street", "Westmount Avenue", "Westminster Drive", "Weston Street",
            "Whitehall Road", "William Street", "Wilson Avenue", "Windsor Street", "Wood Street",
            "Woodland Drive", "York Street", "Young Street",
        ),
    },
    "guelph": {
        "postal_prefixes": ("N1G", "N1H", "N1L", "N1K", "N1E"),
        "streets": (
            # Major streets
            "Stone Road West", "Stone Road East", "Gordon Street", "Carden Street", "Wellington Street West",
            "Wellington Street East", "Speedvale Avenue West", "Speedvale Avenue East", "Edinburgh Road North",
            "Edinburgh Road South", "Woolwich Street", "York Road", "Hanlon Parkway", "Victoria Road North",
            "Victoria Road South", "Imperial Road North", "Imperial Road South", "Silvercreek Parkway North",
            "Silvercreek Parkway South", "Watson Parkway North", "Watson Parkway South", "College Avenue West",
            "College Avenue East", "Kortright Road West", "Kortright Road East", "Elmira Road North",
            "Elmira Road South", "Water Street", "Wyndham Street North", "Wyndham Street South",
            # Downtown core
            "Macdonell Street", "Quebec Street", "Norfolk Street", "Suffolk Street West", "Suffolk Street East",
            "Surrey Street West", "Surrey Street East", "Cork Street West", "Cork Street East",
            "Dublin Street North", "Dublin Street South", "London Road West", "London Road East",
            "Paisley Road", "Paisley Street", "Cardigan Street", "Douglas Street", "Wilson Street",
            "Neeve Street", "Spring Street", "Church Street", "Chapel Lane", "Market Street",
            "Baker Street", "Stuart Street", "Wellington Street", "Waterloo Avenue", "Woodlawn Road West",
            "Woodlawn Road East", "Harvard Road", "Yale Road", "College Street", "University Avenue",
            # University area
            "University of Guelph Campus", "University Centre", "Science Hill", "Research Lane",
            "Agricultural Drive", "Veterinary Road", "Engineering Drive", "Arts Lane", "Commerce Court",
            "Innovation Drive", "Discovery Way", "Knowledge Trail", "Learning Circle", "Campus Road",
            "Academic Way", "Scholar Street", "Student Drive", "Faculty Avenue", "Dean's Row",
            # Residential areas
            "Aberdeen Road", "Alma Street North", "Alma Street South", "Alice Street", "Arthur Street",
            "Balmoral Drive", "Beechwood Avenue", "Belmont Street", "Beverly Street", "Bristol Street",
            "Cambridge Street", "Cardigan Street", "Cassino Avenue", "Cedar Street", "Clarke Street East",
            "Clarke Street West", "College Heights Boulevard", "Conroy Crescent", "Cook Street",
            "Crossingham Drive", "Delaware Avenue", "Dovercliffe Road", "Downey Road", "Drew Street",
            "Eaton Street", "Elizabeth Street", "Emma Street", "Exhibition Street", "Fairview Avenue",
            "Ferndale Avenue", "Fife Road", "Fleming Road", "Forest Street", "Fountain Street East",
            "Fountain Street West", "Franklin Avenue", "Galt Street", "Garden Street", "George Street",
            "Glasgow Street North", "Glasgow Street South", "Glen Street", "Gordon Street", "Grace Street",
            "Grant Avenue", "Grange Road", "Grove Street", "Hamilton Avenue", "Hanlon Road",
            "Harvard Road", "Hazelwood Avenue", "Helen Street", "Henry Street", "Hill Street",
            "Holland Crescent", "Hood Street", "Hume Road", "Imperial Road", "Indian Trail",
            "James Street", "Jane Street", "John Street", "Johnston Street", "Kent Street",
            "King Street", "Kortright Road", "Lowes Road West", "Lowes Road East", "Lynch Circle",
            "MacDonald Street", "Margaret Street", "Mason Street", "Memorial Avenue", "Metcalfe Street",
            "Mitchell Street", "Mohawk Trail", "Mowat Lane", "Mulberry Street", "Munro Street",
            "Niska Road", "North Street", "Northumberland Street", "Norwich Street", "Nottingham Street",
            "Oak Street", "Ontario Street", "Palmer Street", "Park Avenue", "Parkside Drive",
            "Parkview Avenue", "Patricia Avenue", "Pauline Avenue", "Peter Street", "Pleasant Road",
            "Poplar Street", "Princess Street", "Queen Street", "Ridgewood Avenue", "Riverside Park",
            "Ross Street", "Royal Road", "Ruskin Street", "Sackville Street", "Sheridan Street",
            "Short Street", "Sinclair Street", "South Street", "Stephanie Drive", "Stuart Street",
            "Summit Avenue", "Sunset Avenue", "Thompson Drive", "Torrance Street", "Tyndall Avenue",
            "University Avenue", "Victoria Street", "Water Street", "Watson Road", "Waverley Drive",
            "Wellington Street", "Westmount Road", "Willow Road", "Wilson Street", "Windsor Street",
            "Woolwich Street", "York Road", "Yorkshire Street North", "Yorkshire Street South",
            # Newer developments
            "Arkell Road", "Bailey Avenue", "Barbara Street", "Beaver Meadow Drive", "Brant Avenue",
            "Buckthorn Street", "Bullfrog Pond", "Callander Drive", "Campbellville Road", "Centennial Road",
            "Chesterton Lane", "Conservation Drive", "Country Club Drive", "Covered Bridge Drive",
            "Crawford Street", "Dawson Road", "Deer Run", "Eagle Street", "Eastview Road",
            "Elbow Drive", "Elmridge Drive", "Farley Drive", "Ferguson Street", "Fermanagh Avenue",
            "Fife Road", "Flaherty Drive", "Forest Hill Drive", "Frederick Street", "Glenburnie Drive",
            "Goodwin Drive", "Grange Street", "Greengate Road", "Hands Drive", "Hickory Street",
            "Hillview Crescent", "Howitt Street", "Huron Street", "Janeway Street", "Kathleen Street",
            "Keating Street", "King George Drive", "Kirkland Street", "Lakeshore Road", "Lane Street",
            "Lansdowne Street", "Larkspur Drive", "Laurel Glen", "Lee Street", "Lewis Road",
            "Lichen Place", "Livingstone Street", "Lynch Court", "Maple Street", "Marlborough Road",
            "Meadowview Avenue", "Merion Street", "Milson Crescent", "Mohawk Drive", "Mountainview Road",
            "Nicklin Road", "North Creek Drive", "Northview Avenue", "Oliver Street", "Ontario Street",
            "Paisley Road", "Palmer Street", "Parker Place", "Patricia Street", "Paul Avenue",
            "Pearl Street", "Pine Ridge Drive", "Porter Drive", "Queen Elizabeth Way", "Regal Road",
            "Richardson Street", "Ridge Road", "Riverside Drive", "Robertson Lane", "Rosewood Avenue",
            "Running Brook Drive", "Salem Road", "Sanderson Drive", "Schroder Crescent", "Scottsdale Drive",
            "Shackleton Drive", "Silvercreek Trail", "Somerset Street East", "Somerset Street West",
            "Southcreek Trail", "Southgate Drive", "Sparrow Drive", "Starwood Drive", "Stephanie Drive",
            "Stevenson Street North", "Stevenson Street South", "Stone Gate Drive", "Sunnylea Crescent",
            "Surveyor's Ridge", "Terry Boulevard", "Thiessen Drive", "Three Valleys Drive", "Torrance Street",
            "Trappers Trail", "Trillium Drive", "Twin Oaks Drive", "University Village", "Valleyview Drive",
            "Victoria Woods", "Village By The Arboretum", "Walker Way", "Watermeadow Lane", "Watson Road",
            "Waverley Drive", "Westwood Road", "Whitelaw Road", "Wilkie Crescent", "Willow West",
            "Windsor Street", "Woodlily Court", "Woodside Road", "Yorklands Street", "Youngstown Road",
        ),
    },
}
