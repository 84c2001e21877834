"""County to towns tables for the New England states with county data."""

MA_COUNTY_TOWNS = {
    "Barnstable": [
        "Barnstable","Bourne","Brewster","Chatham","Dennis","Eastham","Falmouth","Harwich","Mashpee","Orleans","Provincetown","Sandwich","Truro","Wellfleet","Yarmouth"
    ],
    "Berkshire": [
        "Adams","Alford","Becket","Cheshire","Clarksburg","Dalton","Egremont","Florida","Great Barrington","Hancock","Hinsdale","Lanesborough","Lee","Lenox","Monroe","Monterey","Mount Washington","New Ashford","New Marlborough","North Adams","Otis","Peru","Pittsfield","Richmond","Sandisfield","Savoy","Sheffield","Stockbridge","Tyringham","Washington","West Stockbridge","Williamstown","Windsor"
    ],
    "Bristol": [
        "Acushnet","Attleboro","Berkley","Dartmouth","Dighton","Easton","Fairhaven","Fall River","Freetown","Mansfield","New Bedford","North Attleborough","Norton","Raynham","Rehoboth","Seekonk","Somerset","Swansea","Taunton","Westport"
    ],
    "Dukes": [
        "Gay Head","Chilmark","Edgartown","Gosnold","Oak Bluffs","Tisbury","West Tisbury"
    ],
    "Essex": [
        "Amesbury","Andover","Beverly","Boxford","Danvers","Essex","Georgetown","Gloucester","Groveland","Hamilton","Haverhill","Ipswich","Lawrence","Lynn","Lynnfield","Manchester-by-the-Sea","Marblehead","Merrimac","Methuen","Middleton","Nahant","Newbury","Newburyport","North Andover","Peabody","Rockport","Rowley","Salem","Salisbury","Saugus","Swampscott","Topsfield","Wenham"
    ],
    "Franklin": [
        "Ashfield","Bernardston","Buckland","Charlemont","Colrain","Conway","Deerfield","Erving","Gill","Greenfield","Hawley","Heath","Leverett","Leyden","Monroe","Montague","New Salem","Northfield","Orange","Rowe","Shelburne","Shutesbury","Sunderland","Warwick","Wendell","Whately"
    ],
    "Hampden": [
        "Agawam","Blandford","Brimfield","Chester","Chicopee","East Longmeadow","Granville","Hampden","Holland","Holyoke","Longmeadow","Ludlow","Monson","Montgomery","Palmer","Russell","Southwick","Springfield","Tolland","West Springfield","Westfield","Wilbraham"
    ],
    "Hampshire": [
        "Amherst","Belchertown","Chesterfield","Cummington","Easthampton","Goshen","Granby","Hadley","Hatfield","Huntington","Middlefield","Northampton","Pelham","Plainfield","South Hadley","Southampton","Ware","Westhampton","Williamsburg","Worthington"
    ],
    "Middlesex": [
        "Acton","Arlington","Ashby","Ashland","Ayer","Bedford","Belmont","Billerica","Boxborough","Burlington","Cambridge","Carlisle","Chelmsford","Concord","Dracut","Dunstable","Everett","Framingham","Groton","Holliston","Hopkinton","Hudson","Lexington","Lincoln","Littleton","Lowell","Malden","Marlborough","Maynard","Medford","Melrose","Natick","Newton","North Reading","Pepperell","Reading","Sherborn","Shirley","Somerville","Stoneham","Stow","Sudbury","Tewksbury","Townsend","Tyngsborough","Wakefield","Waltham","Watertown","Wayland","Westford","Weston","Wilmington","Winchester","Woburn"
    ],
    "Nantucket": ["Nantucket"],
    "Norfolk": [
        "Avon","Bellingham","Braintree","Brookline","Canton","Cohasset","Dedham","Dover","Foxborough","Franklin","Holbrook","Medfield","Medway","Milton","Needham","Norfolk","Norwood","Plainville","Quincy","Randolph","Sharon","Stoughton","Walpole","Wellesley","Westwood","Weymouth","Wrentham"
    ],
    "Plymouth": [
        "Abington","Bridgewater","Brockton","Carver","Duxbury","East Bridgewater","Halifax","Hanover","Hanson","Hingham","Hull","Kingston","Lakeville","Marion","Marshfield","Mattapoisett","Middleborough","Norwell","Pembroke","Plymouth","Plympton","Rochester","Rockland","Scituate","Wareham","West Bridgewater","Whitman"
    ],
    "Suffolk": ["Boston","Charlestown","Chelsea","Revere","Winthrop"],
    "Worcester": [
        "Ashburnham","Ashby","Athol","Auburn","Barre","Berlin","Blackstone","Bolton","Boylston","Brookfield","Charlton","Clinton","Douglas","Dudley","East Brookfield","Fitchburg","Gardner","Grafton","Hardwick","Harvard","Holden","Hopedale","Hubbardston","Lancaster","Leicester","Leominster","Lunenburg","Mendon","Milford","Millbury","Millville","New Braintree","Northborough","Northbridge","Oakham","Oxford","Paxton","Petersham","Phillipston","Princeton","Royalston","Rutland","Shrewsbury","Southborough","Southbridge","Spencer","Sterling","Sturbridge","Sutton","Templeton","Upton","Uxbridge","Warren","Webster","West Boylston","West Brookfield","Westborough","Westminster","Winchendon","Worcester"
    ]
}


CT_COUNTY_TOWNS = {
    "Fairfield": [
        "Bethel","Bridgeport","Brookfield","Danbury","Darien","Easton","Fairfield","Greenwich","Monroe","New Canaan","New Fairfield","Newtown","Norwalk","Redding","Ridgefield","Shelton","Stamford","Stratford","Trumbull","Weston","Westport","Wilton"
    ],
    "Hartford": [
        "Avon","Berlin","Bloomfield","Bristol","Burlington","Canton","East Granby","East Hartford","East Windsor","Enfield","Farmington","Glastonbury","Granby","Hartford","Hartland","Manchester","Marlborough","New Britain","Newington","Plainville","Rocky Hill","Simsbury","Somers","South Windsor","Southington","Suffield","West Hartford","Wethersfield","Windsor","Windsor Locks"
    ],
    "Litchfield": [
        "Barkhamsted","Bethlehem","Bridgewater","Canaan","Colebrook","Cornwall","Goshen","Harwinton","Kent","Litchfield","Morris","New Hartford","New Milford","Norfolk","North Canaan","Plymouth","Roxbury","Salisbury","Sharon","Thomaston","Torrington","Warren","Washington","Watertown","Winchester","Woodbury"
    ],
    "Middlesex": [
        "Chester","Clinton","Cromwell","Deep River","Durham","East Haddam","East Hampton","Essex","Haddam","Killingworth","Middlefield","Middletown","Old Saybrook","Portland","Westbrook"
    ],
    "New Haven": [
        "Ansonia","Beacon Falls","Bethany","Branford","Cheshire","Derby","East Haven","Guilford","Hamden","Madison","Meriden","Middlebury","Milford","Naugatuck","New Haven","North Branford","North Haven","Orange","Oxford","Prospect","Seymour","Southbury","Wallingford","Waterbury","Wolcott","Woodbridge"
    ],
    "New London": [
        "Bozrah","Colchester","East Lyme","Franklin","Griswold","Groton","Lebanon","Ledyard","Lisbon","Lyme","Montville","New London","North Stonington","Norwich","Old Lyme","Preston","Salem","Sprague","Stonington","Voluntown","Waterford"
    ],
    "Tolland": [
        "Andover","Bolton","Columbia","Coventry","Ellington","Hebron","Mansfield","Somers","Stafford","Tolland","Union","Vernon","Willington"
    ],
    "Windham": [
        "Ashford","Brooklyn","Canterbury","Chaplin","Eastford","Hampton","Killingly","Plainfield","Pomfret","Putnam","Scotland","Sterling","Thompson","Windham","Woodstock"
    ]
}


RI_COUNTY_TOWNS = {
    "Bristol": ["Barrington","Bristol","Warren"],
    "Kent": ["Coventry","East Greenwich","Warwick","West Greenwich","West Warwick"],
    "Newport": ["Jamestown","Little Compton","Middletown","Newport","Portsmouth","Tiverton"],
    "Providence": [
        "Burrillville","Central Falls","Cranston","Cumberland","East Providence","Foster","Glocester","Johnston","Lincoln","North Providence","North Smithfield","Pawtucket","Providence","Scituate","Smithfield","Woonsocket"
    ],
    "Washington": [
        "Charlestown","Exeter","Hopkinton","Narragansett","New Shoreham","North Kingstown","Richmond","South Kingstown","Westerly"
    ]
}


VT_COUNTY_TOWNS = {
    "Addison": ["Addison","Bridport","Bristol","Cornwall","Ferrisburg","Goshen","Granville","Hancock","Leicester","Lincoln","Middlebury","Monkton","New Haven","Orwell","Panton","Ripton","Salisbury","Shoreham","Starksboro","Vergennes","Waltham","Weybridge","Whiting"],
    "Bennington": ["Arlington","Bennington","Dorset","Glastenbury","Landgrove","Manchester","Peru","Pownal","Readsboro","Rupert","Sandgate","Searsburg","Shaftsbury","Stamford","Sunderland","Winhall","Woodford"],
    "Caledonia": ["Barnet","Burke","Danville","Groton","Hardwick","Kirby","Lyndon","Newark","Peacham","Ryegate","Sheffield","St. Johnsbury","Stannard","Sutton","Walden","Waterford","Wheelock"],
    "Chittenden": ["Bolton","Burlington","Charlotte","Colchester","Essex","Hinesburg","Huntington","Jericho","Milton","Richmond","St. George","Shelburne","South Burlington","Underhill","Westford","Williston","Winooski"],
    "Essex": ["Averill","Bloomfield","Brighton","Brunswick","Canaan","Concord","East Haven","Ferdinand","Granby","Guildhall","Lemington","Lewis","Lunenburg","Maidstone","Norton","Victory"],
    "Franklin": ["Bakersfield","Berkshire","Enosburg","Fairfax","Fairfield","Fletcher","Franklin","Georgia","Highgate","Montgomery","Richford","St. Albans","Sheldon","Swanton"],
    "Grand Isle": ["Alburgh","Grand Isle","Isle La Motte","North Hero","South Hero"],
    "Lamoille": ["Belvidere","Cambridge","Eden","Elmore","Hyde Park","Johnson","Morristown","Stowe","Waterville","Wolcott"],
    "Orange": ["Bradford","Braintree","Brookfield","Chelsea","Corinth","Fairlee","Newbury","Orange","Randolph","Strafford","Thetford","Topsham","Tunbridge","Vershire","Washington","West Fairlee","Williamstown"],
    "Orleans": ["Albany","Barton","Brownington","Charleston","Coventry","Craftsbury","Derby","Glover","Greensboro","Holland","Irasburg","Jay","Lowell","Morgan","Newport","Troy","Westfield","Westmore"],
    "Rutland": ["Benson","Brandon","Castleton","Chittenden","Clarendon","Danby","Fair Haven","Hubbardton","Ira","Mendon","Middletown Springs","Mount Holly","Mount Tabor","Pawlet","Pittsfield","Pittsford","Poultney","Proctor","Rutland","Shrewsbury","Sudbury","Tinmouth","Wallingford","Wells","West Haven","West Rutland"],
    "Washington": ["Barre","Berlin","Cabot","Calais","Duxbury","East Montpelier","Fayston","Marshfield","Middlesex","Montpelier","Moretown","Northfield","Plainfield","Roxbury","Waitsfield","Warren","Waterbury","Woodbury","Worcester"],
    "Windham": ["Athens","Brattleboro","Brookline","Dover","Dummerston","Grafton","Guilford","Halifax","Jamaica","Londonderry","Marlboro","Newfane","Putney","Rockingham","Somerset","Stratton","Townshend","Vernon","Wardsboro","Westminster","Whitingham","Wilmington","Windham"],
    "Windsor": ["Andover","Baltimore","Barnard","Bethel","Bridgewater","Cavendish","Chester","Hartford","Hartland","Ludlow","Norwich","Plymouth","Pomfret","Reading","Rochester","Royalton","Sharon","Springfield","Stockbridge","Weathersfield","Weston","West Windsor","Windsor","Woodstock"]
}


COUNTY_TOWNS_BY_STATE = {
    "MA": MA_COUNTY_TOWNS,
    "CT": CT_COUNTY_TOWNS,
    "RI": RI_COUNTY_TOWNS,
    "VT": VT_COUNTY_TOWNS,
}
