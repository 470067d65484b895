"""Gradient vector table for the gradient and simplex-style kernels.

256 pseudo-random unit vectors, uniformly distributed over the sphere.
The table is a literal so that output never depends on a runtime
random number generator.
"""

GRADIENT_VECTORS: tuple[tuple[float, float, float], ...] = (
    (-0.02974632835597594, -0.8989026616334989, 0.4371374621987343),
    (0.8629541560789932, -0.02516935736109228, -0.5046549593098462),
    (-0.9862119197329449, -0.15194585543038225, -0.06556299561634661),
    (0.5386629911912992, 0.1530637529223424, -0.8285008566454053),
    (0.8430835040063943, -0.5204106460526927, 0.135583792347461),
    (-0.3774283977110318, -0.7085480848436065, -0.596244426444173),
    (0.25972933217397337, -0.9116593091948602, -0.3184618940576911),
    (-0.17123195631534133, 0.9132681719803076, 0.3696225956082344),
    (-0.7585397540666324, 0.21149890899512458, -0.6163486456498504),
    (-0.8493102858812989, 0.19487808339632887, 0.490606329869479),
    (-0.9339190727867579, -0.3469358587098435, -0.08620136557146907),
    (0.39208164841550847, -0.6485408504107074, 0.652431411202997),
    (-0.047057334504911424, -0.3343603170167135, 0.9412697730585933),
    (-0.8128414381032509, 0.532506542055138, -0.23606265941634777),
    (-0.05183445087478701, 0.9902919109716174, -0.12897721026092768),
    (-0.6906497088971044, 0.3655019859639096, 0.6240282668732107),
    (-0.7125801330543786, -0.6356158395424621, -0.29702198319137096),
    (-0.13951235899595602, -0.9245446760663343, 0.35461732000112534),
    (-0.33292860391086554, -0.12424263820698592, 0.9347311439923942),
    (-0.6778343016933489, -0.21005734336639068, -0.704568358603865),
    (-0.5073128815745644, -0.5860785172925883, -0.631779717747122),
    (0.494906680657165, -0.8212096945805697, -0.2840457973070443),
    (0.13566855180163295, 0.4511005195658435, -0.8821011083200574),
    (-0.24120511967806307, 0.7784931286599162, -0.5794553812593222),
    (0.29066617058868705, -0.9424548549510391, -0.16520297713577747),
    (0.8158339783942354, -0.3863433463761052, -0.43029494350776076),
    (-0.8606467100457235, 0.3851992214303862, -0.3330297288484872),
    (-0.8228019794840307, -0.07562785714199999, -0.5632737609557809),
    (-0.7766816543786196, -0.47323930601466474, 0.41570442263036966),
    (-0.34309041617414854, -0.7530726807979756, 0.5614004842936994),
    (-0.45382050046990924, 0.13294981566690622, -0.8811193448491395),
    (-0.591484184914508, -0.7044677084988934, -0.39226484252139926),
    (-0.6785290414790633, 0.6608183548395455, 0.32080748397856956),
    (-0.7626511540648856, -0.011155232233333246, 0.6467138300649823),
    (-0.4648577216082398, -0.3412304462116044, 0.8169878097251058),
    (-0.39038436419095424, -0.33298521348110155, -0.8583244699984789),
    (-0.3719416424037942, -0.763256481092339, -0.5282981721684337),
    (-0.32109025817277786, -0.38950451441979994, -0.8632423062808812),
    (-0.9364548982700204, -0.32106755264608106, -0.14130764361470938),
    (-0.4079002335876017, 0.8969295604035554, 0.17068908317014578),
    (-0.8022622545522169, -0.1684456796149988, 0.5727140018716455),
    (-0.7770476963493311, 0.3938574961442663, -0.490992006380111),
    (0.32078960622461744, -0.9281616937189006, -0.1887058527208865),
    (0.7192337070584714, -0.5957730672685165, 0.3574315696023405),
    (0.677641823065244, 0.31623713422355443, -0.6639244193211198),
    (-0.5210791159626189, -0.8523366745652065, -0.0447073606774211),
    (0.15033285981510391, 0.1439833208376982, -0.9780944916419685),
    (0.9900197842320083, -0.1187814270860754, -0.07584061846137048),
    (-0.9233104917525976, -0.033633398197216904, -0.3825787897221744),
    (0.8895017326707308, 0.35461932473306723, -0.2881523938849569),
    (0.7852871467571519, -0.5949972645384013, 0.17117929877713323),
    (0.8325781594194749, 0.531185225191184, 0.15702186152338982),
    (0.5411265730732205, -0.6785831966901195, -0.496695960406214),
    (0.5282056327480766, -0.13590569837481556, -0.8381697027944028),
    (-0.7231423408092628, -0.6876267043968762, -0.06507434463128449),
    (0.6477490106755948, 0.08059817443763917, 0.7575784800574183),
    (-0.3155644014895322, -0.838481471490788, -0.444261106196791),
    (-0.520479152079228, 0.05719946430278171, 0.8519563800655305),
    (0.7019994979796541, 0.44790489036518044, 0.5536947841756047),
    (0.24080658695308516, -0.14366793689376162, 0.9598810924217105),
    (-0.9856234981962178, -0.1053826814675517, 0.13206365983933213),
    (-0.6342266347279082, -0.006399653344440232, -0.7731207022443414),
    (0.06789837776881841, 0.965295835983615, 0.2521780310198665),
    (-0.35412003655612895, -0.0398495803635908, 0.934350582305342),
    (0.7036207963842278, -0.5901455992250948, -0.39578522788360715),
    (0.5939108341467825, -0.019101631808751997, 0.8043040772899985),
    (-0.6305545181919407, 0.1993324173498258, -0.7501117163337767),
    (0.546534315791515, 0.8141894804976589, -0.1959482878446579),
    (0.5800534913027559, 0.08803579891422837, -0.8098071655258536),
    (-0.9824711887231351, 0.14770794653074867, 0.11372214322909713),
    (0.6818725109712387, -0.5655736411727372, 0.4638710329309106),
    (-0.9735394057529848, -0.17254037403394673, 0.1498360596597195),
    (-0.7669126574682107, 0.42349509912727, 0.4821792994625867),
    (-0.8960706928998613, 0.3816923829103457, 0.2266456224024296),
    (-0.6853729995295393, -0.4582476949563381, 0.5659265867434442),
    (0.4163066569481123, 0.6697455592770359, -0.6149224773980677),
    (-0.5859417410542023, -0.19515858759956342, 0.7865020036697388),
    (0.4117075966163129, -0.46477528413880026, 0.783888251055032),
    (0.055492713499801456, -0.5792549724038488, -0.8132553324103355),
    (0.7594037151523938, -0.19210754926769427, 0.6216113632544875),
    (0.4039460028458105, 0.8622780208650213, -0.30545742996037006),
    (0.9645189779095944, -0.07123338716455989, -0.2542222370393575),
    (-0.6545021100905654, -0.7430982548724693, -0.1393986064940691),
    (-0.056927641182764055, -0.9540759898919532, -0.29410584690049296),
    (0.22996945629198404, 0.740341363286183, 0.6316713662818075),
    (0.7839127045386519, -0.5534601413304543, 0.2813587454147637),
    (-0.8491564287042817, -0.30791551290567953, -0.4290936919860542),
    (0.4799366864409241, -0.46507076110998163, -0.7438884084112942),
    (-0.7108648623714634, 0.6430097666221739, 0.28497295919805765),
    (0.8030835363669707, 0.5956053129648474, -0.01763929659500718),
    (-0.4372327618372471, -0.3382260235667788, -0.833325068000704),
    (0.822336533934929, -0.4079997198083667, 0.39660919504240155),
    (-0.5346678203386432, 0.7308645071769067, -0.42422564048320055),
    (0.3939602922783458, 0.9032240774455058, -0.17023969581350684),
    (0.5029969137622867, 0.4456142549886714, 0.7405552244745195),
    (0.5353604150894353, 0.0982118018114631, -0.838894312735647),
    (-0.6473341879864388, 0.7622044226825525, 0.00169325340539217),
    (-0.2993574031990924, 0.8044888774289098, 0.513013441581279),
    (0.3207808529132547, -0.0223131475343312, 0.9468905786052346),
    (-0.3798598723118067, 0.50884397158676, -0.7725181486457586),
    (-0.3557719273706879, -0.4192299269378313, -0.8352679833769798),
    (0.1491621075921375, -0.2996153841487371, -0.9423275901935995),
    (-0.604921720644486, 0.2837335219521369, -0.7440194892697036),
    (0.3242513492200416, 0.6797227273780528, -0.6579043064266443),
    (-0.023445555303487353, -0.24544418920765723, 0.9691271618939936),
    (0.8283102181676429, 0.5083625887900612, -0.23551997961476445),
    (-0.7728299966917439, 0.33458956483493435, 0.5392435621470213),
    (-0.7939342949137572, -0.4693724397691543, -0.38646843098104),
    (0.5424158162305005, -0.80087083000541, 0.2537538097240031),
    (-0.23511351306858908, -0.4934541980621925, 0.8373915394768119),
    (0.7246596124081988, 0.6114315126446702, 0.31783635960891843),
    (-0.5014272339330051, -0.7587761628762205, -0.41572763165459037),
    (-0.5472155898082014, 0.0228148387418451, 0.8366806926205754),
    (0.7325385926133764, 0.38702278560113296, 0.5600005122832954),
    (-0.9865592063288572, 0.030893717765901357, -0.1604571924544871),
    (0.6858703348906524, 0.723892203282191, 0.07457856088876724),
    (0.7213886492199618, -0.45120687792445763, -0.5253672716207803),
    (-0.2038094985642418, 0.68776475117941, 0.6967362021096051),
    (0.39619005874002594, 0.732139708596547, 0.554080214817077),
    (-0.007377156963928092, -0.5702398852725659, -0.8214450990781188),
    (0.7852721737872187, 0.08168337256698815, 0.613738901913166),
    (-0.8984459944370686, 0.2682495774423555, -0.3476161090657115),
    (-0.2334865038611461, 0.6621073151073862, -0.7121081068180501),
    (-0.512073720293078, 0.50525367494842, 0.694621644448489),
    (0.6555416800175963, -0.19086525257503445, -0.7306405142880977),
    (-0.06501215060325748, 0.7964345217708085, -0.6012199870310724),
    (-0.49919402320027784, -0.86501370821372, 0.050562948919832706),
    (0.40900255343759745, 0.4155970660199554, 0.8124013724736869),
    (-0.7417183426889583, -0.5505962824224647, 0.38301127124577766),
    (-0.0724853032491904, 0.8722349603215303, 0.48368590511381626),
    (-0.8820813074680691, -0.04946935452609613, 0.4684926359914243),
    (0.982442907147821, 0.16657735161878118, 0.08401142852380872),
    (0.7020566633332678, -0.13159341157111598, 0.6998568535782398),
    (-0.6737750460540707, 0.48067952867713915, -0.5612257816828787),
    (-0.9280746015462434, 0.28793847588289045, -0.23615454277023676),
    (-0.2382883360462068, -0.9689330039525116, 0.06623822730034591),
    (-0.07364140701062351, -0.4599454369580405, -0.8848882066085935),
    (0.04667255376697102, 0.9721485159092803, -0.2296713646501303),
    (0.991990201893674, -0.08502501159736962, 0.0934140607714653),
    (-0.7213088743333077, -0.0960387450790394, -0.6859227851964534),
    (0.5852548313948209, 0.40644379079995735, -0.7016268433071674),
    (-0.4633193045374884, -0.7914506995926632, -0.3986740675754845),
    (-0.6426833742581765, 0.6570148656918279, -0.3940679468214512),
    (-0.998761563688206, 0.0008669447473439622, 0.049745223950594664),
    (-0.753239711207269, 0.13909070007919744, 0.6428714604116976),
    (-0.8074259986357051, -0.2330299592036508, -0.5419965819455683),
    (-0.6027723489264825, 0.788232441255101, -0.12391575332731009),
    (0.271839394817456, -0.9603770311261584, 0.06147602386772633),
    (0.5213287490578571, -0.23675052412733258, 0.8198570148088038),
    (-0.8104173853611993, 0.002236701750367097, -0.5858486653305591),
    (-0.21117614405287027, 0.7513061630413952, -0.6252548964694142),
    (0.5918603045260331, 0.3259243026617283, -0.7372073852457106),
    (-0.8021883921849681, -0.2984064658290933, 0.5171531345695257),
    (-0.0936011987404713, -0.22006864187175532, -0.9709833203814924),
    (0.6621596403623212, -0.6533470443057421, 0.3669908042065799),
    (-0.8768074620067978, 0.48079860815928555, -0.00643218168988824),
    (0.2518828590965731, -0.454720220787334, 0.8542742803692818),
    (-0.6512554112194279, -0.0425661275349436, 0.7576638530008495),
    (-0.6249803125691279, -0.6759423305367388, -0.39051449997350574),
    (-0.6249215926602607, -0.7293197591566382, 0.27850617934018373),
    (0.15819313998085738, -0.4229497994709805, -0.8922378593124449),
    (0.4945718659061472, -0.03825138565929858, 0.8682945934124291),
    (-0.6820681574899673, 0.2804242515201251, 0.675385273527354),
    (0.9113519970601835, 0.2841449933268539, 0.2978240423835814),
    (0.9325672397101097, -0.16542570917770463, -0.32086239755153656),
    (-0.5820135889858926, 0.11212154837398465, -0.805412279907614),
    (-0.4859771971857334, 0.299640099012257, 0.821000593714416),
    (-0.42334922711406997, -0.43354303947230177, -0.795497243758291),
    (0.8771767315856998, 0.314891416280577, -0.36249741725623613),
    (-0.2539408297042118, -0.9566153464508792, -0.142832538112998),
    (-0.049368656933707886, 0.9771847016558485, -0.2065739445388317),
    (-0.8508596802233458, -0.493387814405724, 0.18057206086814404),
    (0.3711219621834437, -0.43401908361813846, -0.8209116421639919),
    (-0.6359626308288419, -0.743009394993218, 0.20853913575410843),
    (0.011643140777364717, 0.9767338964240007, -0.21413858328014612),
    (-0.5547041906213762, -0.7631413197083832, -0.3315397216938436),
    (-0.0009500947547711859, -0.29779831292858605, 0.954628337174654),
    (0.5097624079285624, -0.6506053338955785, -0.5628987359814346),
    (0.2626307792218248, 0.6302072753109592, 0.7306598825380206),
    (0.04484785266730067, -0.864624963007013, -0.5004121735692025),
    (0.9965709394223842, -0.07696012424824525, 0.030389175284653906),
    (0.2643941207047817, -0.9481720734315446, -0.1762539874762297),
    (-0.6695810311598205, 0.4307162904842675, -0.6050989339128138),
    (0.08258872036746438, -0.9881455258500573, 0.12941222125664353),
    (-0.01112035985294286, 0.7709815023944713, -0.6367604420520366),
    (0.749786371846755, 0.6597421092009897, 0.050603813491761684),
    (-0.415185540984874, 0.9087698737285079, 0.04193188715726137),
    (-0.4102548654488857, 0.3855813491919814, 0.826449011452496),
    (-0.48054245321393657, 0.6753480000059994, -0.559449756052345),
    (-0.1469813937017858, 0.9010644648530027, 0.4080187496729195),
    (0.6496717995261381, 0.37949795464151376, -0.658716824837029),
    (-0.44421633204239014, -0.7206107925808007, 0.5323456921614708),
    (-0.5609566980364639, -0.7746788381075224, 0.2918908712454141),
    (-0.3830045017479762, -0.7886505202764498, 0.4809759957715869),
    (0.010903181219753083, -0.1663742924216785, 0.9860023912042379),
    (-0.020169603572193412, 0.8735102579766785, 0.4863877221941948),
    (0.4119492604865495, -0.8231606513244589, -0.3907740381546319),
    (-0.6060271139749185, -0.4685781222624349, -0.6427796515636146),
    (0.03562773162920282, 0.8174572442365794, 0.5748863527551293),
    (0.15657287451569943, -0.935988702182719, -0.31529364781454206),
    (0.14131383093186803, 0.9879875415674414, -0.06253813952207565),
    (-0.8284920945908196, 0.5024024470571228, -0.24737144215032458),
    (0.8129002799449608, 0.2185683869360809, -0.5398342292755843),
    (-0.9857108682441805, -0.10850947208701321, 0.12884012842550877),
    (0.8048950004350542, 0.28281587875944225, 0.5216888124123216),
    (0.16413371815935326, 0.6061962653821767, 0.7781941983848811),
    (-0.16287329742388867, 0.7332388063980673, 0.6601765989325941),
    (0.5315676677813291, 0.08036712961769155, 0.8431944847106934),
    (0.7614310112386051, 0.22016510557323216, 0.609713163226843),
    (-0.5952165626175566, -0.7248101177166695, -0.3469402496702969),
    (0.9171656891067821, 0.37898532944486296, -0.12319585541263223),
    (-0.9648204384151634, 0.11945773610369154, -0.23420369531959295),
    (0.5438785486478144, -0.5745339065419971, -0.6116427998058498),
    (-0.8574335119016592, 0.04893610264912814, 0.5122626577503979),
    (-0.46741202132946996, -0.10815664298429344, -0.8773985086008906),
    (0.9850066927700659, 0.17222847484250858, -0.00995829561725259),
    (-0.6550311759534251, 0.5989835755489862, -0.4606005153618753),
    (-0.5497990410843666, -0.7791419149341063, 0.301096148788929),
    (-0.6765910832254394, 0.4552464771415525, -0.5787703786045313),
    (0.602996258932013, -0.7001437426756317, 0.38235356844961643),
    (0.2823405280090528, 0.916860759582748, -0.2822236237116158),
    (-0.8869099660760225, -0.04739724211893165, 0.45950431283563375),
    (0.8216637601369695, -0.3682145652959824, 0.4350709128193557),
    (0.9431987369514391, 0.3057936546230156, -0.12987064104527235),
    (-0.4215296468627495, 0.9051423861428523, -0.05504559585824609),
    (-0.6211610490878322, 0.2927711725691595, 0.7269415324553847),
    (-0.2754508489376979, 0.8349877255601632, 0.4763636509887874),
    (-0.9320793254660751, -0.36113734948155063, -0.02842438826337457),
    (-0.7102448828740799, -0.6045510674406762, -0.3606524826027453),
    (0.1733565056450849, -0.31414041017712174, 0.9334148727357388),
    (0.055411747418739984, 0.08603330809860187, -0.9947501234710217),
    (0.013726697727996976, -0.7582703475099748, 0.6517957178875804),
    (-0.22920756221213703, 0.716466898285039, 0.6588923106901349),
    (0.05168658086376694, -0.9977654937386718, 0.04233812540769577),
    (0.7547676223585119, -0.6553522169737427, 0.028970811981707815),
    (-0.8849169831566315, 0.46152649190100087, 0.06257180031388998),
    (0.25635559049779083, -0.9187332758298644, 0.3003514260053635),
    (-0.48257982294495916, -0.4643004199630091, -0.7426586258225144),
    (-0.18083908288597034, 0.9391980415142163, 0.2918976959772408),
    (-0.5513780802983371, 0.6795002060956499, -0.48400587029755116),
    (-0.8376333263866597, -0.08453621993093653, 0.539651774801314),
    (-0.3626500969929214, 0.6144078317455152, -0.7007053042761981),
    (-0.9379784480090789, 0.15291182048991014, 0.3111501345410943),
    (-0.37661118232935015, -0.7792415802505953, 0.5009456826373936),
    (0.41800875107679625, 0.31566669638225314, -0.8518352075479925),
    (0.7888261071215197, 0.5685351595194739, -0.23349763406440616),
    (-0.13498808131696333, -0.926940352211473, 0.3500854200683534),
    (0.6380707417510973, 0.6501467883720015, -0.4125225837342441),
    (0.9041215866543557, 0.16184891319470757, 0.3954353118315339),
    (-0.7113166761527292, 0.6998970776418498, 0.06459618359804153),
    (0.08805918785423589, 0.9561213024638258, 0.279423754196614),
    (0.5575133764821585, -0.7421602397903493, 0.3719906094484032),
    (0.24599443627976447, -0.750250853976168, 0.6136859077960253),
    (-0.4327530627995399, -0.07914560849988174, -0.8980316026136279),
    (-0.250817478389569, -0.8335727646725498, 0.49218597961589694),
    (0.035116876802051576, 0.9081756451286975, 0.4171136566437781),
)
